"""
Loop session statistics.

Tracks counters for a single run of the dispatch loop. No command text is
kept, only counts.
"""

"""
Copyright (c) 2025 Firefly Software Solutions Inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at:

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from datetime import datetime
from typing import Any, Dict, Optional


class LoopSession:
    """Manages the counters of one dispatch loop run."""

    def __init__(self):
        """Initialize a new loop session."""
        self.start_time = datetime.now()
        self.session_id = self.start_time.strftime("%Y%m%d_%H%M%S_%f")
        self.end_time: Optional[datetime] = None

        self.lines_read = 0
        self.commands_dispatched = 0
        self.unknown_commands = 0
        self.errors = 0

    @property
    def uptime(self) -> float:
        """Get session uptime in seconds."""
        end = self.end_time or datetime.now()
        return (end - self.start_time).total_seconds()

    @property
    def is_finished(self) -> bool:
        return self.end_time is not None

    def record_line(self):
        self.lines_read += 1

    def record_dispatch(self):
        self.commands_dispatched += 1

    def record_unknown(self):
        self.unknown_commands += 1

    def record_error(self):
        self.errors += 1

    def finish(self):
        """Mark the session as ended."""
        if self.end_time is None:
            self.end_time = datetime.now()

    def get_status_summary(self) -> Dict[str, Any]:
        """Get a summary of session status."""
        return {
            "session_id": self.session_id,
            "uptime": self.uptime,
            "finished": self.is_finished,
            "lines_read": self.lines_read,
            "commands_dispatched": self.commands_dispatched,
            "unknown_commands": self.unknown_commands,
            "errors": self.errors,
        }
