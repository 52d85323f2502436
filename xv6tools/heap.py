"""A first-fit free-list allocator over a growing address range."""


class Heap:
    """Hands out addresses from a break-extended arena, merging freed neighbours.

    The free list is circular and address-ordered; a sentinel header sits at
    unit 0, below every block. Sizes are counted in header-sized units.
    """

    HEADER_SIZE = 16
    MIN_GROWTH_UNITS = 4096

    def __init__(self, start=4096, limit=None):
        if start <= 0 or start % self.HEADER_SIZE:
            raise ValueError("start must be a positive multiple of the header size")
        self.brk = start
        self.limit = limit
        self._next = {}
        self._size = {}
        self._freep = None
        self._allocated = set()

    def _sbrk(self, nbytes):
        if self.limit is not None and self.brk + nbytes > self.limit:
            raise MemoryError("heap limit reached")
        old = self.brk
        self.brk += nbytes
        return old

    def _morecore(self, nunits):
        nunits = max(nunits, self.MIN_GROWTH_UNITS)
        header = self._sbrk(nunits * self.HEADER_SIZE) // self.HEADER_SIZE
        self._size[header] = nunits
        self._next[header] = None
        self._release(header)
        return self._freep

    def malloc(self, nbytes):
        """Return the address of a block of at least ``nbytes`` bytes."""
        if nbytes < 0:
            raise ValueError("negative allocation size")
        nunits = (nbytes + self.HEADER_SIZE - 1) // self.HEADER_SIZE + 1
        if self._freep is None:
            self._next[0] = 0
            self._size[0] = 0
            self._freep = 0
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next[p]
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                    self._next[p] = None
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * self.HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
            prevp = p
            p = self._next[p]

    def free(self, ap):
        """Return the block at address ``ap`` to the free list."""
        if ap % self.HEADER_SIZE:
            raise ValueError(f"{ap:#x} is not a block address")
        bp = ap // self.HEADER_SIZE - 1
        if bp not in self._allocated:
            raise ValueError(f"{ap:#x} is not an allocated block")
        self._allocated.discard(bp)
        self._release(bp)

    def _release(self, bp):
        nxt, size = self._next, self._size
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        following = nxt[p]
        if bp + size[bp] == following:
            size[bp] += size[following]
            nxt[bp] = nxt[following]
            del size[following], nxt[following]
        else:
            nxt[bp] = following
        if p + size[p] == bp:
            size[p] += size[bp]
            nxt[p] = nxt[bp]
            del size[bp], nxt[bp]
        else:
            nxt[p] = bp
        self._freep = p