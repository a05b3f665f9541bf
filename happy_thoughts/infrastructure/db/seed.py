"""
Reset the thoughts collection from a static JSON file.

Runs at startup when RESET_DB is set. The file holds a list of objects with
at least ``message``; ``createdAt`` (ISO 8601) and ``username`` are kept when
present. Seeded thoughts have no owner and no likes, so ``hearts`` is
always stored as 0 regardless of the file contents.
"""

# Standard library imports
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.constants import ThoughtFields
from ...domain.models.thought import validate_message
from ...utils.datetime_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)


def load_seed_thoughts(seed_file: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read and normalize seed entries
    
    Args:
        seed_file: Path to the JSON seed file
        
    Returns:
        Documents ready for insertion
        
    Raises:
        ValueError: If the file is not a JSON list
    """
    with open(seed_file, "r", encoding="utf-8") as handle:
        raw_entries = json.load(handle)
    
    if not isinstance(raw_entries, list):
        raise ValueError(f"Seed file {seed_file} must contain a JSON list")
    
    documents = []
    for entry in raw_entries:
        message = entry.get(ThoughtFields.MESSAGE)
        try:
            validate_message(message)
        except ValueError as exception:
            logger.warning(f"Skipping seed entry {message!r}: {exception}")
            continue
        
        document: Dict[str, Any] = {
            ThoughtFields.MESSAGE: message,
            ThoughtFields.HEARTS: 0,
            ThoughtFields.CREATED_AT: _parse_created_at(entry.get(ThoughtFields.CREATED_AT)),
            ThoughtFields.LIKED_BY: [],
        }
        if entry.get(ThoughtFields.USERNAME):
            document[ThoughtFields.USERNAME] = entry[ThoughtFields.USERNAME]
        documents.append(document)
    
    return documents


def _parse_created_at(value: Any) -> datetime:
    if isinstance(value, str) and value:
        try:
            return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
        except ValueError:
            logger.warning(f"Unparseable createdAt {value!r} in seed file, using now")
    return utc_now()


async def reset_thoughts(thought_collection: AsyncIOMotorCollection, seed_file: Union[str, Path]) -> int:
    """
    Wipe the thoughts collection and insert the seed data
    
    Args:
        thought_collection: Target collection
        seed_file: Path to the JSON seed file
        
    Returns:
        Number of thoughts inserted
    """
    documents = load_seed_thoughts(seed_file)
    logger.info("Resetting database!")
    await thought_collection.delete_many({})
    if documents:
        await thought_collection.insert_many(documents)
    logger.info(f"Seeded {len(documents)} thoughts from {seed_file}")
    return len(documents)
