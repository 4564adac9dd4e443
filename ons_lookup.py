import argparse
import logging
import sys

from solders.pubkey import Pubkey

from ons_config import get_client, get_commitment, get_program_id
from ons_errors import NameServiceError
from resolver_logic import query_name_info, resolve_std_ons, split_domain


def _pubkey(value):
    try:
        return Pubkey.from_string(value)
    except Exception as e:
        raise argparse.ArgumentTypeError(f"invalid key {value!r}: {e}")


def build_parser():
    parser = argparse.ArgumentParser(description="Derive SPL Name Service keys for a dotted name")
    parser.add_argument("domain", help="dotted name, e.g. a.b.c")
    parser.add_argument("--parent", type=_pubkey, help="base58 key of a hidden parent name")
    parser.add_argument("--fetch", action="store_true", help="fetch and decode the leaf record")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        keys = resolve_std_ons(args.domain, args.parent, get_program_id())
        for label, key in zip(split_domain(args.domain), keys):
            print(f"{label}: {key}")

        if args.fetch:
            record = query_name_info(get_client(), keys[0], get_commitment())
            print(f"✅ {args.domain} found")
            print(f"Parent: {record.parent_name}")
            print(f"Owner: {record.owner}")
            print(f"Class: {record.name_class}")
            print(f"Data: {record.data.hex()}")
    except (NameServiceError, ValueError) as e:
        print(f"❌ {args.domain}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
