import deal


@deal.chain(
    deal.pre(lambda _: _.align >= 1),
    deal.pre(lambda _: _.offset >= 0),
    deal.ensure(lambda _: 0 <= _.result < _.align),
    deal.ensure(lambda _: (_.offset + _.result) % _.align == 0),
    deal.pure,
)
def calc_align(offset: int, align: int) -> int:
    """Calculate difference from given offset to next aligned offset."""
    return (align - offset) % align


@deal.chain(
    deal.pre(lambda _: _.align >= 1),
    deal.pre(lambda _: _.size >= 0),
    deal.ensure(lambda _: _.size <= _.result < _.size + _.align),
    deal.ensure(lambda _: _.result % _.align == 0),
    deal.pure,
)
def padded_size(size: int, align: int = 2) -> int:
    """Round chunk payload size up to the next aligned size.
    Pad byte values are not inspected.
    """
    return size + calc_align(size, align)
