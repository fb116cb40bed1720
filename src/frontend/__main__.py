from __future__ import annotations
import argparse, dataclasses, json, os, sys
from launcher.config import Config, TOP_K
from . import initialize, rows, search

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _emphasize(text: str, spans) -> str:
    if not _supports_color() or not spans:
        return text
    out, pos = [], 0
    for lo, hi in spans:
        out.append(text[pos:lo]); out.append(_c(text[lo:hi], "1;31")); pos = hi
    out.append(text[pos:])
    return "".join(out)

def _print_table(data) -> None:
    if not data:
        print(_c("(no matches)", "2;37")); return
    print(_c("#  Score  App id                               Name", "1;37"))
    for r in data:
        app_id = (r["app_id"][:34] + "..") if len(r["app_id"]) > 36 else r["app_id"]
        print(f"{r['position'] + 1:<2} {r['score']:<6} {app_id:<36} {_emphasize(r['display_text'], r['matched_spans'])}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Launcher match CLI")
    p.add_argument("--records", required=True, help="JSON-lines file of app records")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop (each line is the full entry text)")
    p.add_argument("-k", type=int, default=TOP_K, help="Rows to show")
    p.add_argument("--prefix", default=None, help="Command prefix (default ':')")
    p.add_argument("--no-recent", action="store_true", help="Do not sort ties by last use")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.k < 1:
        p.error("-k must be at least 1")
    if args.q is None and not args.repl:
        p.error("one of --q or --repl is required")

    cfg = Config()
    if args.prefix is not None:
        cfg = dataclasses.replace(cfg, command_prefix=args.prefix)
    if args.no_recent:
        cfg = dataclasses.replace(cfg, recent_first=False)

    try:
        session = initialize(args.records, cfg, verbose=args.verbose)
    except OSError as e:
        p.error(f"cannot read records: {e}")

    def run_query(q: str) -> None:
        search(q, session)
        data = rows(args.k, session)
        if args.json:
            print(json.dumps(data, ensure_ascii=False, indent=2))
        else:
            _print_table(data)

    if args.q is not None:
        run_query(args.q)

    if args.repl:
        print("Type to filter (empty line to exit).")
        while True:
            try:
                q = input("> ")
            except (EOFError, KeyboardInterrupt):
                print(); break
            if not q:
                break
            run_query(q)
    return 0

if __name__ == "__main__":
    sys.exit(main())
