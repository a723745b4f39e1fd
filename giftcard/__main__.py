""" python -m giftcard CARD_NO: print the card summary and statement as JSON """
import argparse
import getpass
import json
import logging
import sys

from giftcard.errors import GiftCardError
from giftcard.perfect.PerfectGiftCardAPI import BASE_URL, new_client


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='giftcard', description='The Perfect Gift Card balance and statement')
    parser.add_argument('card_no', help='card number printed on the card')
    parser.add_argument('--pin', help='card PIN, asked for when omitted')
    parser.add_argument('--base-url', default=BASE_URL, help='login page URL')
    parser.add_argument('--timeout', type=float, default=None, help='HTTP timeout in seconds')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    pin = args.pin if args.pin is not None else getpass.getpass('PIN: ')
    try:
        client = new_client(base_url=args.base_url, timeout=args.timeout)
        card, _ = client.get_card(args.card_no, pin)
    except GiftCardError as e:
        status = f' (HTTP {e.response.status_code})' if e.response.status_code else ''
        print(f'error: {e}{status}', file=sys.stderr)
        return 1
    print(json.dumps(card.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
