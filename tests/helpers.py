from connectn.utils import Token

A = Token.RED
B = Token.YELLOW


def fill(board, placements):
    """Drop (token, col) pairs in order and return the result of the last drop."""
    result = False
    for token, col in placements:
        result = board.add_token(token, col)
    return result
