from __future__ import annotations
import argparse, json, logging, os, sys

from fuzzmatch import FuzzMatchError, Matcher
from fuzzmatch.config import TOP_K
from .loader import load_candidates, load_lines
from .ranking import RankedCandidate, rank


def _highlight(r: RankedCandidate) -> str:
    """Wrap matched chars in [] for terminal output."""
    hits = set(r.positions)
    return "".join(f"[{ch}]" if i in hits else ch for i, ch in enumerate(r.text))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="fuzzmatch", description="Fuzzy-rank candidate lines against a pattern")
    p.add_argument("pattern", nargs="?", default=None, help="Pattern to match (optional with --repl)")
    p.add_argument("--file", "-f", dest="files", nargs="+", default=[],
                   help="Files or folders with one candidate per line (default: stdin)")
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K results (0 = all)")
    p.add_argument("--case-sensitive", action="store_true", help="Match case exactly")
    p.add_argument("--no-normalize", action="store_true", help="Keep diacritics significant")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["FUZZMATCH_VERBOSE"] = "1"
    if args.pattern is None and not args.repl:
        p.error("a pattern is required unless --repl is given")
    if args.k < 0:
        p.error("-k must be >= 0")
    if args.repl and not args.files:
        p.error("--repl requires --file (stdin is used for queries)")

    try:
        candidates = load_candidates(args.files) if args.files else load_lines(sys.stdin)
    except FileNotFoundError as exc:
        p.error(f"no such file or folder: {exc}")

    matcher = Matcher(case_sensitive=args.case_sensitive, normalize=not args.no_normalize)
    top_k = args.k or None

    def run_query(q: str) -> None:
        try:
            rows = rank(q, candidates, top_k=top_k, matcher=matcher)
        except FuzzMatchError as exc:
            p.error(str(exc))
        if args.json:
            print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            return
        if not rows:
            print("(no matches)"); return
        print("#  Score  Span       Candidate")
        for i, r in enumerate(rows, 1):
            span = f"[{r.start},{r.end})"
            print(f"{i:<2} {r.score:<6} {span:<10} {_highlight(r)}")

    if args.pattern is not None:
        run_query(args.pattern)

    if args.repl:
        print("Type a query (empty line to exit).")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not q:
                break
            run_query(q)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
