import argparse
import logging
import sys
from netconfig import NetConfigError, load_config
from netconfig.store import save

logging.basicConfig(
    format='%(asctime)s %(message)s',
    datefmt='%H:%M:%S',
    level=logging.INFO
)

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Write the effective network table as JSON")
    parser.add_argument("path", help="output file")
    args = parser.parse_args(argv)

    try:
        config = load_config()
        save(config, args.path)
    except (NetConfigError, OSError) as e:
        logging.error(f'Export failed: {e}')
        return 1

    logging.info(f'Exported: {", ".join(config.names())}')
    return 0

if __name__ == "__main__":
    sys.exit(main())
