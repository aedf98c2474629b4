# Log of notification mails.
# Author: NEA HR Engineering
# Date: 2025-07-03
# Version: 0.1.0

from typing import List, Optional

from hr_assistant.models.hr import MailLog
from hr_assistant.services.base_store import RedisHashStore


class MailLogStore(RedisHashStore[MailLog]):
    hash_name = "mail_logs"
    record_type = MailLog

    async def log(self, to: str, subject: str, body: str, status: str) -> MailLog:
        return await self.put(MailLog(to=to, subject=subject, body=body, status=status))

    async def recent(self, limit: Optional[int] = None) -> List[MailLog]:
        """Newest first."""
        logs = sorted(await self.all(), key=lambda log: log.sent_at, reverse=True)
        return logs[:limit] if limit is not None else logs

mail_log_store = MailLogStore()
