# Box drawing block: U+2500 to U+257F
BOX_DRAWING = "".join(chr(i) for i in range(0x2500, 0x2580))

# Double-line horizontal and its corners
DOUBLE_HORIZONTAL = "═╒╔╕╗╘╚╛╝"

# Double-line vertical and the single/double mixed corners
DOUBLE_VERTICAL = "║╓╖╙╜"

# Double-line tees and cross
DOUBLE_JUNCTIONS = "╞╠╡╣╤╦╧╩╪╬"

# Single/double mixed tees and cross
MIXED_JUNCTIONS = "╟╢╥╨╫"

# Rounded corners and diagonals, grouped by the slash they resemble
FORWARD_DIAGONALS = "╭╯╱"
BACK_DIAGONALS = "╮╰╲"
DIAGONAL_CROSS = "╳"

# Everything the transliterator can produce
ASCII_REPLACEMENTS = "-|+=/\\X"
