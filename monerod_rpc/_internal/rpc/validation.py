"""Pre-flight argument checks for the operations that validate input."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from monerod_rpc.exceptions import MonerodValidationError
from monerod_rpc.models import BanEntry, BanList, BlockTemplateRequest

BLOCK_TEMPLATE_USAGE = (
    "get_block_template expects an object with fields: "
    "`wallet_address` (non-empty string, required), "
    "`reserve_size` (integer, required)"
)

BAN_LIST_USAGE = (
    "set_bans expects an ordered sequence of ban entries, "
    "each with `ip`, `ban` and `seconds`"
)


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
        for err in error.errors()
    )


def _block_template_params(request: BlockTemplateRequest, extras: Mapping[str, Any]) -> dict[str, Any]:
    # extras pass through as given; serialize() rejects unencodable values
    return {
        **extras,
        "wallet_address": request.wallet_address,
        "reserve_size": request.reserve_size,
    }


def validate_block_template(args: Any) -> dict[str, Any]:
    """Check getblocktemplate arguments and return the params to send.

    Raises:
        MonerodValidationError: If args is not an object, or wallet_address
            or reserve_size is missing or of the wrong type.
    """
    if isinstance(args, BlockTemplateRequest):
        return _block_template_params(args, args.model_extra or {})
    if not isinstance(args, Mapping):
        raise MonerodValidationError(BLOCK_TEMPLATE_USAGE)

    try:
        request = BlockTemplateRequest.model_validate(dict(args))
    except ValidationError as e:
        raise MonerodValidationError(f"{BLOCK_TEMPLATE_USAGE} ({_describe(e)})") from e
    return _block_template_params(request, args)


def coerce_ban_list(value: Any) -> BanList:
    """Accept anything shaped like a ban list and return a BanList.

    Entries may be BanEntry instances, mappings or any object exposing
    `ip`, `ban` and `seconds` attributes.

    Raises:
        MonerodValidationError: If value is not an ordered sequence or an
            entry lacks one of the required fields.
    """
    if isinstance(value, BanList):
        return value
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MonerodValidationError(BAN_LIST_USAGE)

    entries: list[BanEntry] = []
    for index, item in enumerate(value):
        if isinstance(item, BanEntry):
            entries.append(item)
            continue
        try:
            entries.append(BanEntry.model_validate(item))
        except ValidationError as e:
            raise MonerodValidationError(
                f"{BAN_LIST_USAGE} (entry {index}: {_describe(e)})"
            ) from e
    return BanList(entries)
