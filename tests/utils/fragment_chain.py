__all__ = ["fragment_chain"]


def fragment_chain(levels: int, selection: str = "id") -> str:
    """Get fragments F0 to F<levels-1> where every fragment spreads the next twice.

    The last fragment selects the given selection. Inlining all spreads of F0
    would repeat that selection ``2 ** (levels - 1)`` times.
    """
    fragments = [
        f"fragment F{level} on User {{ ...F{level + 1} ...F{level + 1} }}"
        for level in range(levels - 1)
    ]
    fragments.append(f"fragment F{levels - 1} on User {{ {selection} }}")
    return "\n".join(fragments)
