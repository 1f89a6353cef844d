import argparse
import logging
import sys
from netconfig import NetConfigError, load_config

logging.basicConfig(
    format='%(asctime)s %(message)s',
    datefmt='%H:%M:%S',
    level=logging.INFO
)

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Show the configured network profiles")
    parser.add_argument("name", nargs="?", help="environment name (default: all)")
    args = parser.parse_args(argv)

    try:
        config = load_config()
        profiles = list(config) if args.name is None else [config.lookup(args.name)]
    except NetConfigError as e:
        logging.error(str(e))
        return 1

    for profile in profiles:
        logging.info(f'{profile.name}: {profile.url} network_id={profile.network_id}')

    return 0

if __name__ == "__main__":
    sys.exit(main())
