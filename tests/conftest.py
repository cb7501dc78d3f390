import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Ensure project src is on path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from newscheck.infrastructure.llm.client import RemoteResponse  # noqa: E402


class FakeRemoteClient:
    """Stand-in for RemoteAnalysisClient returning a canned response."""

    def __init__(
        self,
        response: Optional[RemoteResponse] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.response = response or RemoteResponse(kind="fallback", reason="remote_unavailable")
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> RemoteResponse:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def valid_payload() -> Dict[str, Any]:
    return {
        "isCredible": True,
        "confidence": 88,
        "reasoning": "The report matches official statements.",
        "sources": ["Reuters Fact Check", "AP Fact Check"],
        "warnings": [],
        "verdict": "TRUE",
        "categories": ["politics"],
        "detailedAnalysis": {
            "factualAccuracy": 90,
            "sourceCredibility": 85,
            "emotionalManipulation": 10,
            "logicalConsistency": 92,
            "biasLevel": 15,
        },
    }


@pytest.fixture
def remote_text(valid_payload):
    def _make(**overrides: Any) -> RemoteResponse:
        payload = {**valid_payload, **overrides}
        return RemoteResponse(
            kind="remote",
            text="```json\n" + json.dumps(payload) + "\n```",
            endpoint="primary",
        )

    return _make
