from contractlens.analysis.naming import ChatNamer, fallback_title, truncate_title
from contractlens.utils.config import AppConfig


class StubLLM:
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, prompt, **kwargs):
        self.calls.append((prompt, kwargs))
        if self.error:
            raise self.error
        return self.reply


def keyed():
    return AppConfig(google_api_key="test-key")


def assert_valid_title(title):
    assert title
    assert "\n" not in title
    assert 1 <= len(title.split()) <= 5


def test_fallback_keeps_latin_tokens_only():
    text = "2024 -- MASTER Services Agreement between 123 Acme and Beta"
    assert ChatNamer(AppConfig()).name_from(text) == "MASTER Services Agreement between Acme"


def test_fallback_empty_text_is_new_chat():
    namer = ChatNamer(AppConfig())
    assert namer.name_from("") == "New Chat"
    assert namer.name_from("  123 456 \n 789 ") == "New Chat"


def test_llm_title_is_cleaned_and_truncated():
    llm = StubLLM("  Acme Beta\nSupply Agreement Review Draft Final \n")
    title = ChatNamer(keyed(), llm=llm).name_from("contract text")
    assert title == "Acme Beta Supply Agreement Review"
    prompt, kwargs = llm.calls[0]
    assert "contract text" in prompt
    assert kwargs["max_tokens"] == 32


def test_llm_blank_reply_is_new_chat():
    assert ChatNamer(keyed(), llm=StubLLM("   \n ")).name_from("Lease Agreement") == "New Chat"


def test_llm_error_falls_back_to_tokens():
    llm = StubLLM(error=RuntimeError("quota exceeded"))
    assert ChatNamer(keyed(), llm=llm).name_from("Lease Agreement for Unit 4B") == "Lease Agreement for Unit 4B"


def test_shared_truncation_rule():
    assert truncate_title([]) == "New Chat"
    assert truncate_title(["a", "", "b"]) == "a b"
    assert truncate_title("one two three four five six".split()) == "one two three four five"
    for text in ["", "x", "word " * 50, "Ünïcode  àgreement\n\nsigned"]:
        assert_valid_title(fallback_title(text))
