#!/usr/bin/env python3
"""
Print and query the enchantment table.

Usage:
    # Whole table
    python tools/enchantment_table.py

    # Resolve ids and aliases (exit status 1 if any is unknown)
    python tools/enchantment_table.py 16 sharp FLAMEPROTECTION

    # Check the table for duplicate ids / shared aliases
    python tools/enchantment_table.py --check --strict
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from engine.config import ToolConfig  # noqa: E402
from engine.error_handler import ConfigError, DataIntegrityError, log_error, logger  # noqa: E402
from systems.enchantments import (  # noqa: E402
    ENCHANTMENTS,
    EnchantmentRegistry,
    EnchantmentType,
    get_registry,
)


def format_row(enchant: EnchantmentType) -> str:
    return f"{enchant.id:>3}  {enchant.name:<22}  {', '.join(enchant.aliases)}"


def resolve(registry: EnchantmentRegistry, query: str) -> Optional[EnchantmentType]:
    """Numeric queries go by id, everything else by alias."""
    text = query.strip()
    digits = text[1:] if text.startswith("-") else text
    if digits.isdecimal():
        try:
            return registry.from_id(int(text))
        except ValueError:
            # Too many digits to convert; no such id either way.
            return None
    return registry.lookup(text)


def run_check(strict: bool) -> int:
    try:
        registry = EnchantmentRegistry(ENCHANTMENTS, strict=strict)
    except DataIntegrityError as e:
        log_error(e, "check_enchantments")
        print(e.user_message)
        return 1

    issues = registry.validate()
    for issue in issues:
        print(issue)
    if issues:
        return 1
    print(f"OK: {len(registry)} enchantments, {len(registry.by_alias)} aliases")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print and query the enchantment table")
    parser.add_argument("queries", nargs="*", help="Enchantment ids or aliases to resolve")
    parser.add_argument("--check", action="store_true", help="Check the table for integrity problems")
    parser.add_argument("--strict", action="store_true", help="Fail on the first integrity problem")
    parser.add_argument("--config", type=Path, default=None, help="Path to a settings.json")
    args = parser.parse_args(argv)

    config = ToolConfig(args.config)
    config.load()
    try:
        config.apply_logging()
    except ConfigError as e:
        log_error(e, "apply_logging")
        print(e.user_message)
        return 2

    if args.check:
        return run_check(args.strict or config.strict_integrity)

    registry = get_registry()

    if not args.queries:
        for enchant in registry:
            print(format_row(enchant))
        return 0

    status = 0
    for query in args.queries:
        enchant = resolve(registry, query)
        if enchant is None:
            logger.debug(f"Unknown enchantment query: {query!r}")
            print(f"no such enchantment: {query}")
            status = 1
        else:
            print(format_row(enchant))
    return status


if __name__ == "__main__":
    sys.exit(main())
