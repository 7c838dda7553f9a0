"""
Knowledge Store (DynamoDB)

Read and write access to the table of training records.
Records are append-only: there is no update or delete.
"""

import logging
from typing import List

from botocore.exceptions import BotoCoreError, ClientError

from failsafe_bot.core.errors import StoreUnavailable
from failsafe_bot.models.schemas import TrainingRecord

logger = logging.getLogger(__name__)


class KnowledgeStore:
    """Gateway over the DynamoDB training data table."""

    def __init__(self, table):
        """
        Args:
            table: A boto3 DynamoDB Table resource
        """
        self.table = table

    def list_all(self) -> List[TrainingRecord]:
        """Return every stored record via a full table scan.

        Follows LastEvaluatedKey so that tables larger than one scan
        page are read completely.

        Raises:
            StoreUnavailable: If the table cannot be scanned
        """
        items = []
        scan_kwargs = {}
        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to scan training data: {e}")
            raise StoreUnavailable(str(e)) from e

        logger.info(f"Loaded {len(items)} training records")
        return [self._to_record(item) for item in items]

    def put(self, record: TrainingRecord) -> None:
        """Persist a new training record.

        Raises:
            StoreUnavailable: If the write fails
        """
        try:
            self.table.put_item(Item=record.model_dump(by_alias=True))
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to store training record: {e}")
            raise StoreUnavailable(str(e)) from e

        logger.info(f"Stored training record {record.question_id}")

    @staticmethod
    def _to_record(item: dict) -> TrainingRecord:
        return TrainingRecord(
            userId=str(item.get("userId", "")),
            questionId=str(item.get("questionId", "")),
            question=str(item.get("question", "")),
            answer=str(item.get("answer", "")),
        )
