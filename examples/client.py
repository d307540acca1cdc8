# client.py

import sys
import argparse
from filepick import Picker, PickerConfig, PickerError
from filepick.items import GitItemSource, FileItemSource

def main():
    parser = argparse.ArgumentParser(description='Pick a random file and scroll onto it')
    parser.add_argument('-s', '--suffix',
        action='append', default=[],
        help='Only pick items ending with this suffix (repeatable)')
    parser.add_argument('-d', '--duration',
        type=float, default=5.0,
        help='Scroll duration in seconds')
    parser.add_argument('--easing',
        choices=['cubic-bezier', 'linear'], default='cubic-bezier',
        help='Easing curve for the scroll')
    parser.add_argument('--height',
        type=int,
        help='Window height in rows (default: terminal height)')
    parser.add_argument('--seed',
        type=int,
        help='Seed for the random pick')
    parser.add_argument('--repo',
        help='Pick from files tracked by the git repository at this path')
    parser.add_argument('--from-file',
        help='Pick from the lines of this file instead of git')
    parser.add_argument('--plain',
        action='store_true',
        help='Print only the winner when done')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')

    args = parser.parse_args()

    source = FileItemSource(args.from_file) if args.from_file else GitItemSource(args.repo)
    config = PickerConfig(
        suffixes=tuple(args.suffix),
        duration=args.duration,
        easing=args.easing,
        height=args.height,
        seed=args.seed,
        logging_enabled=args.enable_logging,
        log_file=args.log_file
    )

    try:
        picker = Picker(source=source, config=config)
        winner = picker.run()
    except PickerError as e:
        print(f"filepick: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    if args.plain:
        print(winner)
    else:
        sys.stdout.write(picker.announce(winner))
    return 0

if __name__ == "__main__":
    sys.exit(main())
