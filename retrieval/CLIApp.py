import textwrap
from enum import Enum

from index.errors import UnknownKeyword
from retrieval.searcher import Searcher


class State(Enum):
    """
    The various states of the CLIApp.
    """
    INIT = 'Init' # Initial state.
    INPUT = 'Input' # Obtaining query.
    RESULTS = 'Results' # Displaying results.
    EXIT = 'Exit' # User quit.

def format_results(results: list[str]) -> str:
    """
    Format search results for the console.

    Args:
        results: Document names, best first.

    Returns:
        Comma separated document names, or a no-result message.
    """
    if not results:
        return 'No matching documents.'
    return ', '.join(results)

class CLIApp:
    """
    Simple FSM (Finite State Machine) two-keyword query app.

    Args:
        searcher: Searcher answering the queries.
    """
    def __init__(self, searcher: Searcher):
        self._searcher = searcher # Internal searching class.
        self._state: State = State.INIT

        # Defines which states succeed others.
        self._transition_rules: dict[State, State] = {
            State.INIT: State.INPUT,
            State.INPUT: State.RESULTS,
            State.RESULTS: State.INPUT
        }

        # Latest retrieved query input.
        self._latest_query: str | None = None

    @property
    def state(self) -> State:
        return self._state

    def start(self):
        """
        Start the CLI app. It runs until 'exit' is entered.
        """
        while self._state != State.EXIT:
            # Start FSM.
            if self._state == State.INIT:
                self._init()
            elif self._state == State.INPUT:
                self._input()
            elif self._state == State.RESULTS:
                self._results()

            # Next state.
            self._transition()

    def _transition(self):
        """
        Transition the FSM. Entering 'exit' ends it.
        """
        if self._state == State.INPUT and self._latest_query.strip() == 'exit':
            self._state = State.EXIT
        else:
            self._state = self._transition_rules[self._state]

    def _results(self):
        """
        Obtain and display the top five documents for the latest query.
        """
        try:
            results = self._searcher.search_query(self._latest_query)
        except UnknownKeyword as e:
            print(f'No results: {e.keyword!r} does not occur in any document.\n')
            return
        except ValueError as e:
            print(f'{e}\n')
            return

        print('Results:')
        print(format_results(results))
        print()

    def _input(self):
        """
        Obtain query input from user.
        """
        print('Enter two keywords, e.g. \'alice or rabbit\' (\'exit\' to quit):\n> ', end = '')
        self._latest_query = input()

    def _init(self):
        """
        Print app boot-up screen.
        """
        print(textwrap.dedent(f"""
        ===========================================================================
        ========================== Little Search Engine ===========================
        ===========================================================================
        Indexed {len(self._searcher.index.documents)} documents, {self._searcher.index.keyword_count} keywords.
        """))
