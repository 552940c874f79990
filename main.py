"""
Command-line front end for pcmclip.

    python main.py info song.wav
    python main.py reverse song.wav reversed.wav
    python main.py mix a.wav b.wav mixed.wav
    python main.py split song.wav 4 part
"""
import argparse
import sys

from pcmclip.core import ClipError, load_clip, save_clip
from pcmclip.utils.logger import logger


def _info(args):
    clip = load_clip(args.input)
    print(repr(clip))
    return 0


def _reverse(args):
    clip = load_clip(args.input)
    clip.reverse()
    save_clip(clip, args.output)
    return 0


def _stretch(args):
    clip = load_clip(args.input)
    clip.stretch()
    save_clip(clip, args.output)
    return 0


def _mix(args):
    clip = load_clip(args.first)
    clip.mix(load_clip(args.second))
    save_clip(clip, args.output)
    return 0


def _append(args):
    clip = load_clip(args.first)
    clip.append(load_clip(args.second))
    save_clip(clip, args.output)
    return 0


def _slice(args):
    clip = load_clip(args.input)
    save_clip(clip.slice(args.start, args.end), args.output)
    return 0


def _split(args):
    clip = load_clip(args.input)
    for i, part in enumerate(clip.split(args.divisions)):
        save_clip(part, f"{args.prefix}_{i}")
    return 0


def _compare(args):
    result = load_clip(args.first).is_equal(load_clip(args.second))
    print("equal" if result else result.reason)
    return 0 if result else 1


def build_parser():
    parser = argparse.ArgumentParser(prog="pcmclip", description="Edit 16-bit WAVE clips.")
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("info", help="Show channel count, length and duration")
    p.add_argument("input")
    p.set_defaults(func=_info)

    p = commands.add_parser("reverse", help="Play the clip backwards")
    p.add_argument("input")
    p.add_argument("output")
    p.set_defaults(func=_reverse)

    p = commands.add_parser("stretch", help="Double the length, an octave lower")
    p.add_argument("input")
    p.add_argument("output")
    p.set_defaults(func=_stretch)

    p = commands.add_parser("mix", help="Mix two clips with 16-bit saturation")
    p.add_argument("first")
    p.add_argument("second")
    p.add_argument("output")
    p.set_defaults(func=_mix)

    p = commands.add_parser("append", help="Join two clips end to end")
    p.add_argument("first")
    p.add_argument("second")
    p.add_argument("output")
    p.set_defaults(func=_append)

    p = commands.add_parser("slice", help="Keep samples [start, end)")
    p.add_argument("input")
    p.add_argument("start", type=int)
    p.add_argument("end", type=int)
    p.add_argument("output")
    p.set_defaults(func=_slice)

    p = commands.add_parser("split", help="Cut into equal parts named PREFIX_<n>.wav")
    p.add_argument("input")
    p.add_argument("divisions", type=int)
    p.add_argument("prefix")
    p.set_defaults(func=_split)

    p = commands.add_parser("compare", help="Report the first difference between two clips")
    p.add_argument("first")
    p.add_argument("second")
    p.set_defaults(func=_compare)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ClipError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
