import json

from agent_card_action.core.decision import interpret
from agent_card_action.models.policy import PolicyConfig
from agent_card_action.models.process_result import RawProcessResult
from agent_card_action.ui.reporting import render_summary_md


def _decision(stdout: str, policy: PolicyConfig):
	return interpret(RawProcessResult(exit_code=0, stdout=stdout), policy)


def test_render_summary_md_scored():
	payload = {
	    "success": True,
	    "warnings": [{
	        "message": "deprecated field"
	    }],
	    "scoringResult": {
	        "compliance": {
	            "total": 90,
	            "rating": "A"
	        },
	        "trust": {
	            "total": 85,
	            "rating": "B"
	        },
	        "availability": None,
	        "productionReady": True,
	    },
	}
	policy = PolicyConfig(agent_card="./agent-card.json")
	md = render_summary_md(_decision(json.dumps(payload), policy), policy)
	assert "A2A Agent Card Validation" in md
	assert "./agent-card.json" in md
	assert "| passed" in md
	assert "not-tested" in md
	assert "✅ success" in md
	assert "- **Warning:** deprecated field" in md


def test_render_summary_md_malformed():
	policy = PolicyConfig()
	md = render_summary_md(_decision("oops", policy), policy)
	assert "❌ Failed to parse validation output" in md
	assert "| Result             | -" in md
	assert "- **Error:** stdout: oops" in md


def test_render_summary_md_escapes_pipes():
	policy = PolicyConfig(agent_card="a|b.json")
	md = render_summary_md(_decision('{"success": true}', policy), policy)
	assert "a\\|b.json" in md
