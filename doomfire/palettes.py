def palette_doom():
    """The PSX Doom fire gradient, from no heat (0) to max heat (36).

    Entry 0 is fully transparent so cold cells show what is behind the
    window. Every other entry is opaque.
    """
    palette = (
        (0, 0, 0, 0),
        (7, 7, 7, 255),
        (31, 7, 7, 255),
        (47, 15, 7, 255),
        (71, 15, 7, 255),
        (87, 23, 7, 255),
        (103, 31, 7, 255),
        (119, 31, 7, 255),
        (143, 39, 7, 255),
        (159, 47, 7, 255),
        (175, 63, 7, 255),
        (191, 71, 7, 255),
        (199, 71, 7, 255),
        (223, 79, 7, 255),
        (223, 87, 7, 255),
        (223, 87, 7, 255),
        (215, 95, 7, 255),
        (215, 103, 15, 255),
        (207, 111, 15, 255),
        (207, 119, 15, 255),
        (207, 127, 15, 255),
        (207, 135, 23, 255),
        (199, 135, 23, 255),
        (199, 143, 23, 255),
        (199, 151, 31, 255),
        (191, 159, 31, 255),
        (191, 159, 31, 255),
        (191, 167, 39, 255),
        (191, 167, 39, 255),
        (255, 255, 63, 255),
        (255, 255, 111, 255),
        (255, 255, 159, 255),
        (255, 255, 191, 255),
        (255, 255, 223, 255),
        (255, 255, 239, 255),
        (255, 255, 247, 255),
        (255, 255, 255, 255),
    )
    return palette


DOOM_PALETTE = palette_doom()
