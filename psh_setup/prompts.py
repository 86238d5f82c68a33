# stdlib
import logging
import sys
from typing import Optional, TextIO

# first party
from psh_setup.models.user_input import UserInput

logger = logging.getLogger(__name__)

PREPARATION_STEPS_MESSAGE = """
  Before running this script you should prepare your platform.sh project and GitHub account:

  1. Create a p.sh project at https://console.platform.sh/
  2. Generate p.sh API token at https://console.platform.sh/-/users/{user}/settings/tokens
  3. Generate GitHub personal access token (PAT) by following the doc:
      https://docs.github.com/en/authentication/keeping-your-account-and-data-secure/creating-a-personal-access-token
  4. Make sure there are no existing GitHub integrations for the project yet:
      https://console.platform.sh/{project name}/{project id}/-/settings/integrations
     Otherwise the script will fail due to a conflict.

  If everything above is ready press "Enter" to continue
"""

QUESTIONS = {
    "project_id": "platform.sh project ID:\n",
    "api_token": "platform.sh API token:\n",
    "github_token": "Github personal access token(PAT):\n",
    "github_owner": "Github user name:\n",
    "github_repo": "Github repository name:\n",
}


class Prompter:
    """
    Line-based question and answer exchange over a pair of text streams.

    Answers are returned exactly as typed, minus the line ending. Input is not
    masked and empty answers are not re-asked.
    """

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self.closed = False

    def __enter__(self) -> "Prompter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def ask(self, question: str) -> str:
        """
        Write a question and block until a line of input is submitted.

        Raises:
            ValueError: If the prompter has been closed
            EOFError: If the input stream ends before a line is submitted
        """
        if self.closed:
            raise ValueError("I/O operation on closed prompter")

        self._output.write(question)
        self._output.flush()

        line = self._input.readline()
        if not line:
            raise EOFError("Input ended before an answer was given")

        return line.rstrip("\r\n")

    def close(self) -> None:
        # Never close the interpreter's own stdin
        if not self.closed and self._input is not sys.stdin:
            self._input.close()
        self.closed = True


def collect_user_input(prompter: Prompter, site_dir_name: str) -> UserInput:
    """
    Show the preparation steps, then ask each question in order.

    The prompter is closed once every answer has been collected.

    Args:
        prompter: Prompter connected to the operator's terminal
        site_dir_name: Site directory found by the site inspector

    Returns:
        UserInput: The answers, as given
    """
    with prompter:
        # Any answer, including an empty line, acknowledges the steps
        prompter.ask(PREPARATION_STEPS_MESSAGE)

        answers = {}
        for field_name, question in QUESTIONS.items():
            answers[field_name] = prompter.ask(question)

    logger.info("Collected answers", extra={"answered": list(answers)})
    return UserInput(site_dir_name=site_dir_name, **answers)
