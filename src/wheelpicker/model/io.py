"""
Input/Output Manager (JSON)
Handles saving and loading the WheelCollection to a .json file.
"""
import json
import logging
import os

from wheelpicker.model.state import WheelCollection

# Get module logger
logger = logging.getLogger(__name__)


class IOManager:

    @staticmethod
    def save_collection(collection: WheelCollection, filepath: str) -> None:
        logger.debug(f"Saving wheels to: {filepath}")
        try:
            parent = os.path.dirname(filepath)
            if parent:
                os.makedirs(parent, exist_ok=True)

            payload = json.dumps(collection.to_dict(), indent=2, ensure_ascii=False)
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(payload)

            logger.info(f"Saved {len(collection.wheels)} wheel(s) to: {filepath}")

        except Exception as e:
            logger.exception(f"Failed to save wheels: {e}")
            raise e

    @staticmethod
    def load_collection(filepath: str) -> WheelCollection:
        """
        Load the saved wheels.

        A missing or malformed file is not an error: a fresh default
        collection is returned instead.
        """
        if not os.path.exists(filepath):
            logger.info(f"No save file at '{filepath}', starting with a default wheel.")
            return WheelCollection.default()

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            collection = WheelCollection.from_dict(data)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Could not read save file '{filepath}' ({e}); starting with a default wheel.")
            return WheelCollection.default()

        logger.info(f"Loaded {len(collection.wheels)} wheel(s) from: {filepath}")
        return collection
