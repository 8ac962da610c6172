"""YAML ruleset loader - turns the fee rules document into domain objects"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
import yaml
from pydantic import ValidationError
from nwfee_gateway.domain.models import Ruleset, FeeDefinition, RateComponents, MatchCriteria
from nwfee_gateway.domain.exceptions import RulesetLoadError
from nwfee_gateway.infrastructure.rulesets.schemas import RulesetSchema, FeeSchema
from nwfee_gateway.config import settings


class DecimalSafeLoader(yaml.SafeLoader):
    """SafeLoader that reads YAML floats as exact Decimals"""


def _construct_decimal(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> Decimal:
    text = loader.construct_scalar(node).replace("_", "")
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise RulesetLoadError(f"Unsupported decimal value {text!r} at {node.start_mark}") from e


DecimalSafeLoader.add_constructor("tag:yaml.org,2002:float", _construct_decimal)


def _to_fee_definition(fee: FeeSchema) -> FeeDefinition:
    return FeeDefinition(
        key=fee.key,
        name=fee.name,
        description=fee.description,
        rates=RateComponents(
            pct_rate=fee.pct_rate,
            auth_rate=fee.auth_rate,
            tx_rate=fee.tx_rate,
        ),
        criteria=tuple(MatchCriteria(**rule.model_dump()) for rule in fee.rules),
    )


def _check_amount_ranges(document: RulesetSchema, strict: bool) -> None:
    """Inverted min/max ranges never match; flag them, and refuse them in strict mode"""
    for fee in document.fees:
        for index, rule in enumerate(fee.rules):
            if not rule.has_inverted_range:
                continue
            message = (
                f"Fee {fee.key} rule {index} has minTxAmount {rule.min_tx_amount} "
                f"above maxTxAmount {rule.max_tx_amount} and can never match"
            )
            if strict:
                raise RulesetLoadError(message)
            logging.warning(message, extra={"fee_key": fee.key, "rule_index": index})


def parse_ruleset(text: str, strict: bool | None = None) -> Ruleset:
    """
    Parse a YAML ruleset document.

    Raises:
        RulesetLoadError: On invalid YAML, schema violations (negative rates,
            unknown fields, duplicate fee keys) or, in strict mode, inverted amount ranges
    """
    if strict is None:
        strict = settings.strict_ruleset_validation

    try:
        raw = yaml.load(text, Loader=DecimalSafeLoader)
    except yaml.YAMLError as e:
        raise RulesetLoadError(f"Ruleset is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise RulesetLoadError("Ruleset document must be a mapping")

    try:
        document = RulesetSchema.model_validate(raw)
    except ValidationError as e:
        raise RulesetLoadError(f"Ruleset does not match the fee rule schema: {e}") from e

    _check_amount_ranges(document, strict)

    return Ruleset(
        id=document.id,
        name=document.name,
        effective_date=document.effective_date,
        status=document.status,
        fees=tuple(_to_fee_definition(fee) for fee in document.fees),
    )


def load_ruleset(path: str | Path | None = None, strict: bool | None = None) -> Ruleset:
    """Read and parse the ruleset file (default: settings.ruleset_path)"""
    ruleset_path = Path(path or settings.ruleset_path)

    try:
        text = ruleset_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RulesetLoadError(f"Cannot read ruleset {ruleset_path}: {e}") from e

    ruleset = parse_ruleset(text, strict=strict)

    logging.info(
        "Ruleset loaded",
        extra={
            "ruleset_id": ruleset.id,
            "ruleset_status": ruleset.status,
            "effective_date": ruleset.effective_date,
            "fee_count": len(ruleset.fees),
            "path": str(ruleset_path),
        },
    )
    return ruleset
