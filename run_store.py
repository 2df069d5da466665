from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from bookstore.cashier import CashRegister
from bookstore.config import DEFAULT_INITIAL_CASH, DEFAULT_LOYALTY_RATE, LedgerConfig
from bookstore.console import StoreConsole
from bookstore.ledger import StoreLedger


def _decimal(raw: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Interactive book and magazine store simulator.")
    p.add_argument("--initial-cash", type=_decimal, default=DEFAULT_INITIAL_CASH)
    p.add_argument("--loyalty-rate", type=_decimal, default=DEFAULT_LOYALTY_RATE, help="Discount for old customers, 0..1")
    p.add_argument("--strict", action="store_true", help="Reject negative quantities/prices and empty titles on intake")
    p.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def build_ledger(config: LedgerConfig) -> StoreLedger:
    # the register is created here and lent to the ledger
    register = CashRegister(config.initial_cash)
    return StoreLedger(register, config)


def main(argv: Optional[List[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")

    try:
        config = LedgerConfig(
            initial_cash=args.initial_cash,
            loyalty_rate=args.loyalty_rate,
            strict_validation=args.strict,
        )
    except ValueError as e:
        p.error(str(e))

    StoreConsole(build_ledger(config)).run()


if __name__ == "__main__":
    main()
