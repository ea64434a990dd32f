"""Entry point for tango CLI client."""

import argparse
import sys

from core.config import LEVELS, DIRECTIONS, MODES
from cli.api_client import TangoAPIClient
from cli.console import ConsoleUI


def main():
    parser = argparse.ArgumentParser(description='Tango - adaptive vocabulary quiz')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--level',
        type=int,
        choices=LEVELS,
        help='Word level (default: suggested by rank)'
    )
    parser.add_argument(
        '--direction',
        choices=DIRECTIONS,
        default='ja2en',
        help='Translation direction (default: ja2en)'
    )
    parser.add_argument(
        '--mode',
        choices=MODES,
        default='mc10',
        help='mc10: choices, type10: typing, mix10: verb forms + series (default: mc10)'
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Clear rank and answer history before starting'
    )
    args = parser.parse_args()

    client = TangoAPIClient(base_url=args.server)
    if args.reset:
        client.reset_profile()
        print('Profile reset.')
    ui = ConsoleUI(client, level=args.level, direction=args.direction, mode=args.mode)

    try:
        ui.run()
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
