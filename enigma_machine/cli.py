# command line driver
#
#   python -m enigma_machine generate --key CTR --seed 91021234 --outfile machine.json
#   python -m enigma_machine encode --config machine.json HELLO ENIGMA
#   python -m enigma_machine status --config machine.json
#   python -m enigma_machine demo

import argparse
import logging
import sys
from pathlib import Path

from .config import build_machine, dump_config, load_config
from .display import format_status
from .errors import ConfigurationError
from .generate import random_machine
from .logging_config import setup_logging

DEMO_SEED = 91021234
DEMO_KEY = "CTR"
DEMO_TEXT = "HELLO ENIGMA!_QWERTYUIOPASDFGHJKLZXCVBNM"


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="enigma_machine", description="Rotor cipher machine.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--log-file", help="Also write logs to this file")
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Write a random machine config as JSON")
    gen.add_argument("--key", required=True, help="Initial rotor letters, one per rotor")
    gen.add_argument(
        "--seed",
        type=int,
        help="Integer seed for deterministic output (omit for fresh randomness)",
    )
    gen.add_argument("--outfile", type=Path, help="Write to this file (stdout if omitted)")

    enc = sub.add_parser("encode", help="Encode (or decode) text with a configured machine")
    enc.add_argument("--config", type=Path, required=True)
    enc.add_argument("text", nargs="+")

    st = sub.add_parser("status", help="Show a configured machine")
    st.add_argument("--config", type=Path, required=True)

    demo = sub.add_parser("demo", help="Encode with one machine, decode with its twin")
    demo.add_argument("--seed", type=int, default=DEMO_SEED)
    demo.add_argument("--key", default=DEMO_KEY)
    demo.add_argument("--text", default=DEMO_TEXT)

    return p.parse_args(argv)


def _load(path):
    return build_machine(load_config(path))


def cmd_generate(args):
    text = dump_config(random_machine(args.key, seed=args.seed)) + "\n"
    if args.outfile:
        args.outfile.write_text(text, encoding="utf-8")
        print("Wrote {} ({} bytes)".format(args.outfile, len(text)))
    else:
        sys.stdout.write(text)


def cmd_encode(args):
    print(_load(args.config).encode(" ".join(args.text)))


def cmd_status(args):
    print(format_status(_load(args.config).status()))


def cmd_demo(args):
    sender = random_machine(args.key, seed=args.seed)
    # identical twin used for decryption
    receiver = sender.copy()

    text = args.text
    print("plaintext:  {}\n".format(text))
    print("sender before encoding:")
    print(format_status(sender.status()) + "\n")

    text = sender.encode(text)
    print("ciphertext: {}\n".format(text))
    print("sender after encoding:")
    print(format_status(sender.status()) + "\n")

    print("receiver before decoding:")
    print(format_status(receiver.status()) + "\n")

    text = receiver.encode(text)
    print("decrypted:  {}\n".format(text))
    print("receiver after decoding:")
    print(format_status(receiver.status()))


COMMANDS = {
    "generate": cmd_generate,
    "encode": cmd_encode,
    "status": cmd_status,
    "demo": cmd_demo,
}


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        COMMANDS[args.command](args)
    except (ConfigurationError, OSError) as e:
        sys.exit("{} failed: {}".format(args.command, e))


if __name__ == "__main__":
    main()
