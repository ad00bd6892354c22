"""
HTML e-mail templates for published interview results.

Contains:
- Candidate report with a question/answer/score table
- Compact candidate report with totals only
- Interviewer summary

All values arrive already converted to (optionally escaped) text.
"""


class ReportTemplates:
    """
    Markup for every e-mail the publish flow sends.

    Candidate reports share the page chrome and closing block; only the
    opening paragraph and the optional table differ between them.
    """

    BASE_STYLE = """body {
    font-family: Arial, sans-serif;
    background-color: #f5f5f5;
    padding: 20px;
  }
  .container {
    max-width: 600px;
    margin: 0 auto;
    background-color: #fff;
    border-radius: 10px;
    padding: 20px;
    box-shadow: 0 0 10px rgba(0, 0, 0, 0.1);
  }
  h1 {
    color: #2a2392;
    text-align: center;
  }
  h3 {
    color: #2a2392;
  }
  p {
    line-height: 1.6;
  }"""

    TABLE_STYLE = """
  table {
    width: 100%;
    border-collapse: collapse;
    margin-top: 20px;
  }
  th, td {
    padding: 8px;
    border-bottom: 1px solid #ddd;
    text-align: left;
  }
  th {
    background-color: #f2f2f2;
  }"""

    SUMMARY_STYLE = """body {
    font-family: Arial, sans-serif;
    background-color: #f5f5f5;
    padding: 20px;
  }
  .container {
    max-width: 600px;
    margin: 0 auto;
    background-color: #fff;
    border-radius: 10px;
    padding: 20px;
    box-shadow: 0 0 10px rgba(0, 0, 0, 0.1);
  }
  h1 {
    color: #2a2392;
    text-align: center;
  }
  p {
    line-height: 1.6;
  }
  ul {
    list-style-type: none;
    padding: 0;
  }
  li {
    margin-bottom: 10px;
  }
  .result-details {
    background-color: #f9f9f9;
    padding: 10px;
    border-radius: 5px;
  }
  .result-details p {
    margin: 0;
  }
  .total-score {
    font-weight: bold;
    color: #2a2392;
  }
  .percentage {
    color: #2a2392;
    font-size: 20px;
    text-align: center;
    margin-top: 20px;
  }"""

    def _page(self, style: str, content: str) -> str:
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<style>
  {style}
</style>
</head>
<body>
<div class="container">
{content}
</div>
</body>
</html>"""

    def _closing(self, marks: str, total_marks: str, percentage: str, company: str) -> str:
        return f"""  <p>Your Score: {marks}</p>
  <p>Total Score: {total_marks}</p>
  <p>Percentage: {percentage}%</p>
  <p>Once again, well done!</p>
  <div class="message">
  <p>Thank you for your interest in {company}.</p>
  <p>If you would like feedback on your interview performance or have any questions, please feel free to reach out to us. We are happy to provide any assistance or guidance.</p>
  </div>
  <strong><h3>Best regards,</h3>
  <h3>{company}.</h3></strong>"""

    def selected_clause(self, company: str) -> str:
        return (
            " We are pleased to inform you that you have been selected to proceed to the "
            f"next round of the interview process by <strong>{company}</strong>. "
            "Further details will be communicated to you shortly."
        )

    def rejected_clause(self, company: str) -> str:
        return (
            " We regret to inform you that you have not been selected for further "
            f"consideration in the interview process by <strong>{company}</strong>."
        )

    def table_report(
        self,
        header: str,
        name: str,
        clause: str,
        rows: list[tuple[str, str, str]],
        marks: str,
        total_marks: str,
        percentage: str,
        company: str,
    ) -> str:
        """Candidate report listing every question, answer and score."""
        table_rows = "".join(
            f"""
    <tr>
      <td>{question}</td>
      <td>{answer}</td>
      <td>{score}</td>
    </tr>"""
            for question, answer, score in rows
        )

        content = f"""  <h1>{header}</h1>
  <p>Dear <strong>{name}</strong>,</p>
  <p>Congratulations on completing the interview!.{clause} Below are the details of your performance:</p>
  <table>
    <tr>
      <th>Question</th>
      <th>Answer</th>
      <th>Score</th>
    </tr>{table_rows}
  </table>
{self._closing(marks, total_marks, percentage, company)}"""

        return self._page(self.BASE_STYLE + self.TABLE_STYLE, content)

    def narrative_report(
        self,
        header: str,
        name: str,
        clause: str,
        marks: str,
        total_marks: str,
        percentage: str,
        company: str,
    ) -> str:
        """Candidate report with totals only."""
        content = f"""  <h1>{header}</h1>
  <p>Dear <strong>{name}</strong>,</p>
  <p><strong>Congratulations!</strong> You have successfully completed the interview process with {company}.{clause}</p>
{self._closing(marks, total_marks, percentage, company)}"""

        return self._page(self.BASE_STYLE, content)

    def interviewer_summary(
        self,
        interviewer: str,
        name: str,
        email: str,
        marks: str,
        total_marks: str,
        percentage: str,
    ) -> str:
        """Short result summary for the interviewer."""
        content = f"""  <h1>Interview Results</h1>
  <p>Dear {interviewer},</p>
  <p>Thank you for conducting the interview. Below are the results:</p>
  <div class="result-details">
    <ul>
      <li>Name: {name}</li>
      <li>Email: {email}</li>
      <li class="total-score">Total Score: {marks}/{total_marks}</li>
    </ul>
  </div>
  <p class="percentage">Total Percentage: {percentage}</p>"""

        return self._page(self.SUMMARY_STYLE, content)
