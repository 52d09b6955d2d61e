"""CLI entrypoint for italy_geo."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from italy_geo.logging_config import setup_logging
from italy_geo.models import MatchResponse, ProvinceResponse, ResolveResponse


def main() -> None:
    setup_logging()

    parser = argparse.ArgumentParser(prog="italy-geo")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("serve")

    resolve_parser = sub.add_parser("resolve", help="Canonicalize a province to its code")
    resolve_parser.add_argument("text")

    search_parser = sub.add_parser("search", help="Autocomplete provinces")
    search_parser.add_argument("query")

    region_parser = sub.add_parser("region", help="List provinces of a region")
    region_parser.add_argument("name")

    normalize_parser = sub.add_parser("normalize", help="Normalize a comune name")
    normalize_parser.add_argument("name")

    match_parser = sub.add_parser("match", help="Fuzzy-compare two comune names")
    match_parser.add_argument("a")
    match_parser.add_argument("b")

    export_parser = sub.add_parser("export", help="Dump records and lookup index as JSONL")
    export_parser.add_argument("--out", default="data/provinces")

    args = parser.parse_args()

    if args.command == "serve":
        _serve()
    elif args.command == "resolve":
        _resolve(args.text)
    elif args.command == "search":
        _search(args.query)
    elif args.command == "region":
        _region(args.name)
    elif args.command == "normalize":
        from italy_geo.municipality import normalize_municipality

        print(normalize_municipality(args.name))
    elif args.command == "match":
        _match(args.a, args.b)
    elif args.command == "export":
        export(Path(args.out))
        print(f"Exported province registry to {args.out}")


def _serve() -> None:
    import uvicorn

    from italy_geo.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "italy_geo.api:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=(settings.env == "development"),
        log_level=settings.log_level.lower(),
    )


def _print_json(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _resolve(text: str) -> None:
    from italy_geo.registry import get_registry

    record = get_registry().resolve_province(text)
    out = ResolveResponse(
        query=text,
        code=record.code if record else None,
        province=ProvinceResponse.from_record(record) if record else None,
    )
    _print_json(out.model_dump())


def _search(query: str) -> None:
    from italy_geo.registry import get_registry

    records = get_registry().search_provinces(query)
    if not records:
        print("(none)")
        return
    for r in records:
        print(f"{r.code}  {r.name:<24} {r.region}")


def _region(name: str) -> None:
    from italy_geo.registry import get_registry

    records = get_registry().find_provinces_in_region(name)
    if not records:
        print(f"No provinces for region '{name}'")
        return
    print(f"{name}: {len(records)} province")
    for r in records:
        print(f"  {r.code}  {r.name} (capoluogo: {r.seat})")


def _match(a: str, b: str) -> None:
    from italy_geo.municipality import match_municipality, normalize_municipality

    out = MatchResponse(
        a=a,
        b=b,
        normalized_a=normalize_municipality(a),
        normalized_b=normalize_municipality(b),
        match=match_municipality(a, b),
    )
    _print_json(out.model_dump())


def _write_jsonl(path: Path, rows: list[dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")


def export(out_dir: Path) -> None:
    """Write provinces.jsonl and lookup_index.jsonl (sorted by token) to out_dir."""
    from italy_geo.registry import get_registry

    registry = get_registry()
    _write_jsonl(
        out_dir / "provinces.jsonl",
        [ProvinceResponse.from_record(r).model_dump() for r in registry.records],
    )
    _write_jsonl(
        out_dir / "lookup_index.jsonl",
        [{"token": k, "code": v} for k, v in sorted(registry.lookup_index.items())],
    )


if __name__ == "__main__":
    main()
