"""Storage layer for Blue Lock Terminal."""
