"""Bookkeeping for when a piece of telemetry was updated, sent and acknowledged."""

from __future__ import annotations

from dataclasses import dataclass

_U32 = 0xFFFFFFFF


@dataclass
class DataState:
    """Dirty/sent/ACK tracking for one telemetry value; times in microseconds."""

    dirty_since: int = 0
    last_sent: int = 0
    last_update: int = 0
    ack_at_seq: int = -1
    ack_received: bool = False

    def score(self, now: int) -> int:
        """Priority for sending: grows with time dirty and time since last send."""
        if self.dirty_since > 0:
            result = (now - self.dirty_since) * 50 + (now - self.last_sent)
        else:
            result = now - self.last_sent
        return result & _U32

    def update(self, changed: bool, now: int) -> None:
        """Record that the value was received; mark it dirty if it changed."""
        if changed:
            self.ack_at_seq = -1
            self.ack_received = False
            if self.dirty_since == 0:
                self.dirty_since = now
        self.last_update = now

    def sent(self, ack_at_seq: int, now: int) -> None:
        """Record that the value was sent, expecting an ACK at ``ack_at_seq``."""
        self.ack_at_seq = ack_at_seq
        self.dirty_since = 0
        self.last_sent = now

    def stop_ack(self) -> None:
        """Stop waiting for an ACK."""
        self.ack_at_seq = -1

    def reset_ack(self) -> None:
        """Stop waiting for an ACK and forget any ACK already received."""
        self.stop_ack()
        self.ack_received = False

    def update_ack_received(self, seq: int) -> None:
        """Mark the ACK received if ``seq`` is the one being waited for."""
        if not self.ack_received and self.ack_at_seq >= 0 and self.ack_at_seq == seq:
            self.ack_received = True
            self.ack_at_seq = -1

    def has_value(self) -> bool:
        return self.last_update > 0

    def is_dirty(self) -> bool:
        return self.dirty_since > 0