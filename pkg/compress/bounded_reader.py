import io

from .constant import ERROR_READ_SIZE_POSITIVE
from .type import BoundedRead, ReadStatus


class BoundedReader:
    """Stream wrapper enforcing a maximum cumulative byte count.

    Every read returns at most ``min(size, remaining)`` bytes and charges them
    against ``remaining``. Once the budget is spent, a read probes the source
    with a single byte to tell a true end of stream (EOF) from a source that
    still has data (LIMIT). The probed byte is dropped.

    Only ``read1`` is used on the source, so each call performs at most one
    underlying read and memory stays constant regardless of the payload size.
    """

    def __init__(self, source: io.BufferedIOBase, limit: int):
        self._source = source
        self.remaining = limit

    @property
    def exhausted(self) -> bool:
        """True once the byte budget has been spent."""
        return self.remaining <= 0

    def read(self, size: int) -> BoundedRead:
        """Read up to size bytes within the remaining budget.

        Raises:
            ValueError: If size is not positive
            Any error raised by the source stream (corrupt data, checksum).
        """
        if size <= 0:
            raise ValueError(ERROR_READ_SIZE_POSITIVE.format(size=size))

        if self.remaining <= 0:
            if self._source.read1(1):
                return BoundedRead(ReadStatus.LIMIT)
            return BoundedRead(ReadStatus.EOF)

        data = self._source.read1(min(size, self.remaining))
        if not data:
            return BoundedRead(ReadStatus.EOF)

        self.remaining -= len(data)
        return BoundedRead(ReadStatus.DATA, data)


__all__ = ["BoundedReader"]
