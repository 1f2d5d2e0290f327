import argparse
import json
import logging
import sys
from nortonguide.lib.exceptions import NGError
from nortonguide.lib.guide import Guide
from nortonguide.lib.render import to_html, to_plain_text, to_terminal_text

RENDERERS = {
    "plain": to_plain_text,
    "terminal": to_terminal_text,
    "html": to_html,
}


def dump_text(guide: Guide, renderer) -> None:
    for entry in guide.entries():
        path = " » ".join([guide.title] + guide.menu_path(entry))
        print(f"=== {path} (offset {entry.offset})")
        for line in entry.lines:
            print(renderer(line))
        if entry.is_long and entry.see_also:
            print("See also: " + ", ".join(entry.see_also.prompts))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Dump a Norton Guide file to JSON or text.")
    parser.add_argument("guide_filepath", help="Path to the guide file.")
    parser.add_argument("--entries", action="store_true", help="Include every entry in the JSON dump.")
    parser.add_argument("--text", choices=sorted(RENDERERS), help="Print the text of every entry instead of JSON.")
    parser.add_argument("--lenient", action="store_true", help="Open files that don't look like guides.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        guide = Guide(args.guide_filepath).open(strict=not args.lenient)
        if args.text:
            dump_text(guide, RENDERERS[args.text])
        else:
            dump = guide.model_dump()
            if args.entries:
                dump["entries"] = [entry.model_dump(mode="json") for entry in guide.entries()]
            print(json.dumps(dump, indent=2))
        return 0
    except (NGError, OSError) as e:
        print(f"Error reading {args.guide_filepath}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
