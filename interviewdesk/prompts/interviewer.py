"""
AI Interviewer Prompt Templates

Builds the question generation conversation:
- A system message with the interviewer persona for the role
- A user message with the caller's instructions and the output format
"""


class InterviewerPrompts:
    """
    Prompt templates for generating interview question sets.

    The model must answer with a bare JSON array of
    {question, answer, weightage} objects.
    """

    OUTPUT_FORMAT = """[{
        "question": "generated question",
        "answer": "answer for the question",
        "weightage":"weightage for the question"
    },
    ........]"""

    def system_prompt(self, role: str) -> str:
        return (
            f"Act as an {role} in Tech Industry with 30+ years of experience, "
            "going to conduct an Crucial Technical Interview for your organisation, ok ?"
        )

    def user_prompt(self, content: str) -> str:
        return (
            f"{content}Just give me only the array of objects with question, answer and "
            "weightage as keys with their respective values only in this format "
            f"{self.OUTPUT_FORMAT}"
        )

    def question_generation_messages(self, role: str, content: str) -> list[dict[str, str]]:
        """Messages for one question generation request."""
        return [
            {"role": "system", "content": self.system_prompt(role)},
            {"role": "user", "content": self.user_prompt(content)},
        ]
