from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

from .config import settings
from .errors import ListingFailure
from .services.catalog import list_collections
from .services.s3_service import S3ListingClient
from .services.stats import compute_stats


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "photo_catalog.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    cfg = settings.model_copy(update={"AWS_BUCKET_NAME": args.bucket, "AWS_REGION": args.region})
    listing = S3ListingClient.from_settings(cfg)

    try:
        records = listing.list_objects_sync()
    except ListingFailure as exc:
        print(f"ERROR {exc}")
        return 1

    collections = list_collections(records)
    stats = compute_stats(records)

    if args.json:
        print(json.dumps({
            "collections": [c.to_dict() for c in collections],
            "stats": stats.to_dict(),
        }, indent=2))
        return 0

    print(f"s3://{cfg.AWS_BUCKET_NAME} ({cfg.AWS_REGION})")
    if not collections:
        print("(no collections)")
    for c in collections:
        print(f"  {c.name:<40} {c.last_modified}")
    print(
        "Summary: "
        f"collections={stats.collection_count} "
        f"images={stats.image_count} "
        f"storage={stats.storage_mib} MiB ({stats.storage_gib} GiB)"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="photo-catalog")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=settings.HOST)
    p_serve.add_argument("--port", type=int, default=settings.PORT)
    p_serve.add_argument("--reload", action="store_true")
    p_serve.set_defaults(func=cmd_serve)

    p_report = sub.add_parser("report", help="Print collections and bucket stats")
    p_report.add_argument("--bucket", default=settings.AWS_BUCKET_NAME, help="S3 bucket name")
    p_report.add_argument("--region", default=settings.AWS_REGION, help="AWS region override")
    p_report.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    p_report.set_defaults(func=cmd_report)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("ERROR interrupted")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
