from contractlens.summarize.summarizer import Summarizer, heuristic_document_summary
from contractlens.utils.config import AppConfig

CONTRACT = (
    "This Services Agreement is entered into between Acme Corp and Beta LLC. "
    "The Customer shall pay each invoice within thirty days of receipt. "
    "Either party may terminate this Agreement upon sixty days written notice. "
    "This Agreement shall be governed by the laws of the State of Delaware."
)


class StubLLM:
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt, **kwargs):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


def test_heuristic_summary_categories():
    out = heuristic_document_summary(CONTRACT)
    lines = out.splitlines()
    assert 1 <= len(lines) <= 6
    assert all(l.startswith("- ") for l in lines)
    assert any(l.startswith("- Payment:") for l in lines)
    assert any("Delaware" in l for l in lines)


def test_heuristic_summary_empty_text():
    assert heuristic_document_summary("") == "- (No text extracted)"


def test_summarizer_without_credential_uses_heuristic():
    assert Summarizer(AppConfig()).summarize(CONTRACT) == heuristic_document_summary(CONTRACT, 6)


def test_summarizer_uses_llm_reply():
    llm = StubLLM("- Acme and Beta sign a services deal\n- Net 30 payment")
    out = Summarizer(AppConfig(google_api_key="k"), llm=llm).summarize(CONTRACT)
    assert out.startswith("- Acme and Beta")
    assert "6 concise bullet points" in llm.prompts[0]


def test_summarizer_degrades_on_error_or_blank():
    cfg = AppConfig(google_api_key="k")
    expected = heuristic_document_summary(CONTRACT, 6)
    assert Summarizer(cfg, llm=StubLLM(error=RuntimeError("timeout"))).summarize(CONTRACT) == expected
    assert Summarizer(cfg, llm=StubLLM("  ")).summarize(CONTRACT) == expected
