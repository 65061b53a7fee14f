"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that prompts for whatever the command
line left out, unless running in non-interactive mode, in which case defaults are used or the run fails.

Typical usage example:

    seedrsa keygen --key me.key --public-key me.pub
    OR
    python -m seedrsa encrypt --public-key me.pub --message "Hi there!"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing
import warnings

import seedrsa
from seedrsa.rsa import import_public
from seedrsa.rsa import Keypair
from seedrsa.seed import Seed

RANDOM_SEED = "random"


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in Seeded RSA.",
            choices=["keygen", "encrypt", "decrypt", "identity"],
        ),
    "keygen":
        HelpData("Key pair generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "identity":
        HelpData("Public identity display utility."),
    "key":
        HelpData(
            description="Location of the key pair file.",
            format=pathlib.Path,
        ),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
        ),
    "seed_p":
        HelpData(
            description="Seed for the first prime, as 64 hex digits. Defaults to a fresh random seed.",
            format=Seed.fromhex,
            default=RANDOM_SEED,
            advanced=True,
        ),
    "seed_q":
        HelpData(
            description="Seed for the second prime, as 64 hex digits. Defaults to a fresh random seed.",
            format=Seed.fromhex,
            default=RANDOM_SEED,
            advanced=True,
        ),
    "message":
        HelpData(
            description="Message or path to file containing payload. If Path start with `P:`",
            format=str,
        ),
    "encoding":
        HelpData(description="Payload encoding.", choices=["utf-8", "latin-1", "ascii"], advanced=True, default="utf-8"),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("key", "public_key", "seed_p", "seed_q"),
    "encrypt": ("public_key", "message", "encoding"),
    "decrypt": ("key", "message", "encoding"),
    "identity": ("key",),
}

keyfile = argparse.ArgumentParser(add_help=False)
keyfile.add_argument("--key", "-k", type=help_dict["key"].format, help=help_dict["key"].description)
pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key",
                    "--public-key",
                    "-p",
                    type=help_dict["public_key"].format,
                    help=help_dict["public_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
encp = argparse.ArgumentParser(add_help=False)
encp.add_argument("--encoding", "-e", choices=help_dict["encoding"].choices, help=help_dict["encoding"].description)
corep = argparse.ArgumentParser(prog="seedrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {seedrsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[keyfile, pubkey], help=help_dict["keygen"].description)
keygen.add_argument("--seed-p", dest="seed_p", type=help_dict["seed_p"].format, help=help_dict["seed_p"].description)
keygen.add_argument("--seed-q", dest="seed_q", type=help_dict["seed_q"].format, help=help_dict["seed_q"].description)
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)
encrypt = commands.add_parser("encrypt", parents=[pubkey, payloads, encp], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[keyfile, payloads, encp], help=help_dict["decrypt"].description)
identity = commands.add_parser("identity", parents=[keyfile], help=help_dict["identity"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr("We could not convert your value, please try again.")


def check_message(mess: str, enc) -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        mess = mess[2:]
        with open(mess, "r", encoding=enc) as f:
            mess = f.read()
    return mess


def resolve_seed(value: Seed | str, prntr: typing.Callable = print) -> Seed:
    """Replace the random-seed placeholder with fresh seed material, echoing it for reproducibility."""
    if value == RANDOM_SEED:
        value = Seed.random()
        prntr(f"Generated seed: {value.hex()}")
    return value


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to Seeded RSA!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    match args.subcommand:
        case "keygen":
            if args.key.exists() or args.public_key.exists():
                rs = getattr(args, "overwrite", None)
                if rs is None:
                    rs = choice_handler("overwrite", pstatus, pspr)
                if rs == "N":
                    print("Destination key pair or public key already exists!")
                    return
            seed_p = resolve_seed(args.seed_p)
            seed_q = resolve_seed(args.seed_q)
            if seed_p == seed_q:
                print("The two seeds must differ!")
                sys.exit(1)
            keypair = Keypair.generate(seed_p, seed_q)
            keypair.export(args.key)
            keypair.export_public(args.public_key)
            pspr("\nKey pair generated!")
        case "encrypt":
            warnings.warn("Textbook byte-wise RSA is unsecure! Please use with care.", RuntimeWarning)
            args.message = check_message(args.message, args.encoding)
            try:
                payload = args.message.encode(args.encoding)
            except UnicodeEncodeError:
                print(f"The message cannot be encoded as {args.encoding}!")
                sys.exit(1)
            e, n = import_public(args.public_key)
            ciph = seedrsa.encrypt(payload, e, n)
            pspr("Ciphertext:")
            print(ciph)
        case "decrypt":
            args.message = check_message(args.message, "ascii")
            keypair = Keypair.import_key(args.key)
            clear = keypair.decrypt(seedrsa.strip_ciphertext(args.message.strip()))
            pspr("Cleartext:")
            print(clear.decode(args.encoding))
        case "identity":
            keypair = Keypair.import_key(args.key)
            print(keypair.public_key_display())
    pspr("Thank you for using Seeded RSA!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
