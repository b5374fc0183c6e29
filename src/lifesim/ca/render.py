import sys

ALIVE = '#'
DEAD = '.'

# cursor home + erase display
CLEAR = "\033[H\033[2J"

def render_cell(alive, alive_glyph=ALIVE, dead_glyph=DEAD):
    return alive_glyph if alive else dead_glyph

def render_grid(cells, alive_glyph=ALIVE, dead_glyph=DEAD):
    """One line per row, each terminated by a newline."""
    return ''.join(''.join(render_cell(c, alive_glyph, dead_glyph) for c in row) + '\n'
                   for row in cells)

def clear_screen(out=None):
    out = out if out is not None else sys.stdout
    out.write(CLEAR)
