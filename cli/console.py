"""Console UI for tango application."""

import time

from core.config import AUTO_NEXT_MS, MIN_HISTORY_FOR_RANK, PROMOTE_ACC, DEMOTE_ACC
from core.ranking import class_for_rank
from cli.api_client import TangoAPIClient


class ConsoleUI:
    """Console user interface for tango application."""

    def __init__(self, client: TangoAPIClient, level: int = None,
                 direction: str = 'ja2en', mode: str = 'mc10', pause: bool = True):
        self.client = client
        self.level = level
        self.direction = direction
        self.mode = mode
        self.pause = pause

    def print_status(self, status: dict):
        """Print rank summary."""
        acc = status['accuracy']
        acc_text = '--%' if acc is None else f"{round(acc * 100)}%"
        print('\n' + '=' * 50)
        print(f"Rank {status['rank']} | Class: {status['class_name']} ({status['class_key']})")
        print(f"Rolling accuracy: {acc_text} over {status['rolling_count']} answers")
        print(f"Suggested level: {status['suggested_level']}")
        print('=' * 50)

    def print_question(self, q: dict):
        print('\n' + '-' * 40)
        print(f"Q{q['index'] + 1}/{q['total']}  Lv{q['level']}  score {q['score']}")
        print(q['prompt_sub'])
        print(f"\n>>> {q['prompt_main']}")
        if q['options']:
            for i, opt in enumerate(q['options'], 1):
                print(f"  {i}. {opt}")

    def read_answer(self, q: dict) -> str | None:
        """Read one answer. Returns None if the user quits."""
        while True:
            user_input = input('==> ').strip()
            if user_input.lower() == 'exit':
                return None
            if not q['options']:
                return user_input
            if user_input.isdigit() and 1 <= int(user_input) <= len(q['options']):
                return q['options'][int(user_input) - 1]
            print(f"Enter a number from 1 to {len(q['options'])}")

    def print_feedback(self, result: dict):
        if result['correct']:
            print(f"Correct! Answer: {result['correct_answer']}")
        else:
            print(f"Wrong. Answer: {result['correct_answer']} (you: {result['your_answer']})")

    def print_result(self, result: dict):
        """Print the session result and review list."""
        print('\n' + '=' * 50)
        print(f"RESULT  {result['score']} / {result['total']}  ({round(result['accuracy'] * 100)}%)")
        print(result['note'])
        if result['rank_after'] != result['rank_before']:
            print(f"Rank {result['rank_before']} -> {result['rank_after']}")
        if result['class_up']:
            print(f"\n*** CLASS UP! Now {class_for_rank(result['rank_after'])['name']} ***")
        print('-' * 50)
        for h in result['history']:
            tag = 'OK' if h['correct'] else 'NG'
            print(f"[{tag}] {h['prompt_main']}")
            print(f"     Answer: {h['correct_answer']} {h['review_extra']}")
        print('=' * 50 + '\n')

    def run(self):
        """Run one quiz session."""
        try:
            health = self.client.health_check()
            print(f"Connected to {health['service']} server ({health['words']} words)")
        except Exception as e:
            print(f"Error: Cannot connect to server at {self.client.base_url}: {e}")
            print("Make sure the server is running: python run_server.py")
            return

        self.print_status(self.client.get_status())
        print(f"Rank up at {round(PROMOTE_ACC * 100)}%+, down below {round(DEMOTE_ACC * 100)}% "
              f"(needs {MIN_HISTORY_FOR_RANK}+ answers)")
        print('Type "exit" to quit\n')

        question = self.client.start_session(self.direction, self.mode, self.level)
        while True:
            self.print_question(question)
            answer = self.read_answer(question)
            if answer is None:
                self.client.abandon_session()
                print('Goodbye!')
                return

            self.print_feedback(self.client.submit_answer(answer))
            if self.pause:
                time.sleep(AUTO_NEXT_MS / 1000)

            step = self.client.next_question()
            if step['finished']:
                self.print_result(step['result'])
                return
            question = step['question']
