# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-16
# Description: SemanticMemoryDemo
# -----------------------------------------------------------------------------
"""
Semantic memory using Azure AI Search.

Stores GitHub sample data as embedded records in an Azure AI Search index
and reads them back by key. Semantic memory stores data like a traditional
DB and adds the ability to query it with natural language.

Usage:
  python -m demo.SemanticMemoryDemo                     # get the README record
  python -m demo.SemanticMemoryDemo --create --store    # create index, save samples
  python -m demo.SemanticMemoryDemo --search "getting started"
  python -m demo.SemanticMemoryDemo --delete id_1 --natural-id

Env vars (config/Config.py, Config.ENV_VARS), with the names the
Semantic Kernel sample used:
  AZURE_AISEARCH_ENDPOINT   Azure AI Search endpoint (same name)
  AZURE_AISEARCH_KEY        Azure AI Search admin key (same name)
  OPENAI_API_KEY            OpenAI key (was CLIENT_KEY)
  AZURE_OPENAI_API_KEY      Azure OpenAI key (was AZURE_CLIENT_KEY)
  AZURE_OPENAI_ENDPOINT     Azure OpenAI endpoint (was CLIENT_ENDPOINT)
  EMBEDDING_MODEL_ID        embedding model or deployment (was MODEL_ID)

When AZURE_OPENAI_API_KEY is set, Azure OpenAI is used and needs
AZURE_OPENAI_ENDPOINT; otherwise OPENAI_API_KEY is required.

Exit codes:
  0 - success
  1 - configuration or service error
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import settings
from api.AppContainer import AppContainer
from demo.SampleData import README_KEY, sample_data, sample_data_with_no_mapping
from memory.RecordIdCodec import encode_id
from memory.exceptions import SemanticMemoryError
from utility.logging_utils import get_logger

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="semantic-memory-demo",
        description="Semantic memory using Azure AI Search.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--create",
        action="store_true",
        help="Create the memory index from the record definition if it does not exist.",
    )
    p.add_argument(
        "--store",
        action="store_true",
        help="Embed and save the GitHub sample data.",
    )
    p.add_argument(
        "--store-no-mapping",
        action="store_true",
        dest="store_no_mapping",
        help="Embed and save the plain-id sample data (id_1, id_2).",
    )
    p.add_argument(
        "--get",
        metavar="KEY",
        default=README_KEY,
        help="Storage key to read back. (default: the README record)",
    )
    p.add_argument(
        "--delete",
        metavar="KEY",
        help="Storage key to delete.",
    )
    p.add_argument(
        "--natural-id",
        action="store_true",
        dest="natural_id",
        help="Treat --get/--delete values as natural ids and encode them first.",
    )
    p.add_argument(
        "--search",
        metavar="TEXT",
        help="Natural language query against the stored records.",
    )
    p.add_argument(
        "--limit",
        type=int,
        default=settings.SEARCH_LIMIT_DEFAULT,
        help=f"Number of search results. (default: {settings.SEARCH_LIMIT_DEFAULT})",
    )
    return p


def _banner() -> None:
    print("==============================================================")
    print("========== Semantic Memory using Azure AI Search =============")
    print("==============================================================")


def run(args: argparse.Namespace, container: AppContainer) -> None:
    store = container.store
    memory = container.memory_service

    if args.create:
        created = store.create_collection_if_not_exists(dimensions=settings.EMBEDDING_DIMENSIONS_DEFAULT)
        print(f"Index '{store.options.default_collection_name}' {'created' if created else 'already exists'}.")

    saved: List[str] = []
    if args.store:
        saved += memory.store_data(sample_data())
    if args.store_no_mapping:
        saved += memory.store_data(sample_data_with_no_mapping())
    for key in saved:
        print(f"Saved key: {key}")

    get_key = encode_id(args.get) if args.natural_id else args.get
    record = memory.get(get_key)
    if record is None:
        print(f"No record found for key '{get_key}'.")
    else:
        print(f"Found record '{record.id}': {record.text}")

    if args.delete:
        delete_key = encode_id(args.delete) if args.natural_id else args.delete
        memory.remove(delete_key)
        print(f"Deleted key '{delete_key}'.")

    if args.search:
        print(f"Query: {args.search}")
        for i, result in enumerate(memory.search(args.search, limit=args.limit), start=1):
            print(f"  {i}. [{result.relevance}] {result.record.id} - {result.record.description}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _banner()

    try:
        container = AppContainer()
        run(args, container)
    except (SemanticMemoryError, ValueError) as e:
        logger.error("Semantic memory demo failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
