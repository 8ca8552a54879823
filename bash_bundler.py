"""
Collects/bundles bash files into one file.

By default uses the safer `# import ./filename.sh` syntax to include other bash
files, but can be set to use the already existing `source ./filename.sh` syntax.

`# import` paths are relative to the file containing them; `source` paths are
relative to the root file, so scripts using `source` still run as plain bash
from the root file's directory.

Configs can be used to override/save arguments:

    [builder]
    replace_source = true
    replace_comment = false
    root_path = "./tests/source.sh"
"""
import argparse
import os
import sys

from bundle_core.config import BundleConfig, load_config
from bundle_core.errors import BundleError
from resolver import resolve, set_verbose

def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)

def existing_path(value):
    if not os.path.exists(value):
        raise argparse.ArgumentTypeError(f"'{value}' not found")
    return value

def build_parser():
    parser = argparse.ArgumentParser(
        prog="bash-bundler",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("root_path", nargs="?", type=existing_path, help="starting or `main` bash file")
    parser.add_argument("-c", "--config", type=existing_path, help="path to your toml config")
    parser.add_argument("--enable-source", action="store_true", help="enable the `source ./file.sh` syntax")
    parser.add_argument("--disable-comment", action="store_true", help="disable the `# import ./file.sh` syntax")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    return parser

def settings_from_args(args):
    """Build the run's BundleConfig; a config file replaces the command line options."""
    if args.config:
        config = load_config(args.config)
        if args.verbose:
            log(f"Loaded options from {args.config}")
        return config
    return BundleConfig(
        root_path=args.root_path,
        enable_source=args.enable_source,
        enable_comment=not args.disable_comment,
    )

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.root_path is None and args.config is None:
        parser.error("the following arguments are required: root_path (or --config)")

    set_verbose(args.verbose)

    try:
        config = settings_from_args(args)
        output = resolve(config)
    except BundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)

if __name__ == "__main__":
    main()
