# main.py - docseek command line
#   docseek index  <folder> [--output FILE] [--recursive] [--workers N]
#   docseek search <index-file> <query> [--limit N]
#   docseek stats  <index-file>
#   docseek serve  <index-file> [--host H] [--port P]

import argparse
import logging
import signal
import sys
import threading

import config
import index_store
from errors import BuildCancelled, DocseekError
from indexer import index_folder
from search import search

log = logging.getLogger("docseek")


def cmd_index(args):
    cancel = threading.Event()
    previous = signal.signal(signal.SIGINT, lambda signum, frame: cancel.set())
    try:
        index = index_folder(args.folder, recursive=args.recursive,
                             workers=args.workers, cancel=cancel)
    finally:
        signal.signal(signal.SIGINT, previous)
    index_store.save(index, args.output)

    print(f"Files indexed : {len(index)}")
    print(f"Files skipped : {len(index.skipped)}")
    print(f"Output        : {args.output}")


def cmd_search(args):
    results = search(args.index_file, args.query, args.limit)
    if not results:
        print("No results found.")
        return
    for path, score in results:
        print(f"  {path} => {score:.6f}")


def cmd_stats(args):
    stats = index_store.describe(index_store.load(args.index_file))
    print(f"{args.index_file} contains {stats.document_count} files")
    for path, unique in stats.unique_terms.items():
        print(f"  {path} has {unique} unique terms")


def cmd_serve(args):
    from backend import serve

    serve(args.index_file, host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docseek", description="Local markup document search")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every indexed file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("index", help="Index a folder of markup documents")
    p.add_argument("folder")
    p.add_argument("--output", default=config.INDEX_FILE, help="Output index file")
    p.add_argument("--recursive", action="store_true", help="Descend into sub-directories")
    p.add_argument("--workers", type=int, default=config.WORKERS, help="Extraction threads")
    p.set_defaults(func=cmd_index)

    p = sub.add_parser("search", help="Search an index file")
    p.add_argument("index_file")
    p.add_argument("query")
    p.add_argument("--limit", type=int, default=config.RESULT_LIMIT)
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("stats", help="Show what an index file contains")
    p.add_argument("index_file")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("serve", help="Serve an index file over HTTP")
    p.add_argument("index_file")
    p.add_argument("--host", default=config.HOST)
    p.add_argument("--port", type=int, default=config.PORT)
    p.set_defaults(func=cmd_serve)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
    try:
        args.func(args)
    except BuildCancelled as e:
        print(f"ERROR: {e}; index not written", file=sys.stderr)
        return 1
    except (DocseekError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
