"""
Tests for prompt assembly.
"""
from failsafe_bot.models.schemas import TrainingRecord
from failsafe_bot.services.prompts import build_prompt


def record(question, answer, n=1):
    return TrainingRecord(userId=f"u{n}", questionId=f"q{n}", question=question, answer=answer)


class TestBuildPrompt:
    """Test building the system context."""

    def test_single_record(self):
        prompt = build_prompt([record("What is FailSafe?", "A monitoring tool.")], "How does it work?")
        assert prompt == (
            "You are a bot trained to answer questions about the FailSafe product. "
            "Here is the training data:\n\n"
            "Q: What is FailSafe?\nA: A monitoring tool.\n\n"
            "\nUser's Question: How does it work?\nAnswer:"
        )

    def test_one_pair_per_record_in_order(self):
        records = [record(f"question {i}", f"answer {i}", n=i) for i in range(5)]
        prompt = build_prompt(records, "final question")

        assert prompt.count("Q: ") == 5
        assert prompt.count("A: ") == 5
        positions = [prompt.index(f"Q: question {i}\nA: answer {i}\n\n") for i in range(5)]
        assert positions == sorted(positions)
        assert prompt.count("final question") == 1
        assert prompt.endswith("User's Question: final question\nAnswer:")
        assert prompt.index("final question") > positions[-1]

    def test_no_records(self):
        prompt = build_prompt([], "anything?")
        assert "Q: " not in prompt
        assert prompt.endswith("\nUser's Question: anything?\nAnswer:")

    def test_product_name(self):
        prompt = build_prompt([], "q", product="Acme")
        assert prompt.startswith("You are a bot trained to answer questions about the Acme product.")

    def test_duplicates_are_kept(self):
        records = [record("Article", "same text", n=1), record("Article", "same text", n=2)]
        prompt = build_prompt(records, "q")
        assert prompt.count("Q: Article\nA: same text\n\n") == 2
