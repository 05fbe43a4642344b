import argparse
import json
import logging
import sys

from stresstest.dispatcher import dispatch
from stresstest.report import build_report

logger = logging.getLogger(__name__)


def run(url, requests, workers):
    outcomes, elapsed = dispatch(url, requests, workers)
    return build_report(outcomes, elapsed)


def build_parser():
    ap = argparse.ArgumentParser(
        prog='stresstest',
        description="Send a fixed number of GET requests to a URL and report the status codes.",
    )
    ap.add_argument('-u', '--url', required=True, help="target URL")
    ap.add_argument('-r', '--requests', type=int, required=True, help="total number of requests")
    ap.add_argument('-c', '--concurrency', type=int, required=True, dest='workers',
                    help="maximum number of requests in flight")
    ap.add_argument('-v', '--verbose', action='count', default=0,
                    help="log more (-v for progress, -vv for debug)")
    return ap


def parse_args(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.requests < 0:
        ap.error("--requests must be 0 or more")
    if args.workers < 1:
        ap.error("--concurrency must be at least 1")
    return args


def setup_logging(verbosity):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)
    logger.debug("Arguments: %s", vars(args))

    print(f"Running stress test for {args.url}", file=sys.stderr)
    print(f"Requests: {args.requests}", file=sys.stderr)
    print(f"Workers: {args.workers}", file=sys.stderr)
    print("\nProcessing...", file=sys.stderr)

    report = run(args.url, args.requests, args.workers)
    print(json.dumps(report.to_dict()))
    return 0
