# boxchess

A two-player chess game for one screen. White and Black take turns at the
same mouse on an 8×8 board drawn in a resizable pygame window.

## Installing

    pip install .

## Playing

    boxchess

The window opens as a square sized to 80% of the smaller side of your
display (300 pixels if the display size cannot be read), and is never
smaller than 400×400 pixels.

- Press the mouse button on one of your pieces. The squares it may move to
  are highlighted in light blue.
- Release the button over a highlighted square to move there. Releasing on
  the piece's own square, or anywhere not highlighted, cancels the move.
- White moves first; turns alternate after every completed move.

Pieces are drawn from `texture/<side><letter>.svg` in the current directory
(for example `texture/WK.svg` for the white king, `texture/BN.svg` for a
black knight). Where an image is missing, the piece is drawn as a disc
marked with its letter.

The game knows about:

- **Check** – the king of the side to move is shown on a red square, and only
  moves that block or capture the checking piece are offered; the king itself
  may not step onto attacked squares.
- **Pins** – a piece standing between its own king and an attacking rook,
  bishop or queen is held to that line.
- **Castling** – move the king two squares towards an unmoved rook with an
  empty path between them; the rook jumps over.
- **En passant** – a pawn that has just advanced two squares can be taken in
  passing on the next move.
- **Promotion** – when a pawn reaches the last rank, a purple row of four
  choices (queen, knight, rook, bishop) appears across the middle of the
  board. Click the one you want and the pawn is replaced.

When you press on a piece while in check and it has no move, the winner is
printed on the console. A king that can only stay where it is prints a
stalemate message.

## Using it from Python

The game logic works without a display:

    from boxchess.board import Board

    board = Board(800, 800)
    board.select(450, 650)   # press on the white pawn at e2
    board.release(450, 450)  # release on e4

`Board.select` and `Board.release` take pixel positions inside the square
board area; `Board.targets` holds the squares lit up for the selected piece,
`Board.in_check` tells whether the side to move is in check, and
`Board.outcome` carries the last result message. `Board.grid` is the
`boxchess.box.Grid` of squares, each a `boxchess.box.Box` whose `piece` is
the piece standing on it.

`boxchess.window.Window` wraps a `Board` with a pygame window; its `run()`
method drives the event loop that the `boxchess` command starts.

## What it does not do

There is no computer opponent, no saving or loading of games, no move list
or notation, and no draw rules beyond the stalemate message above. Both
sides are played by hand in the one window.

## Running the tests

    pip install ".[test]"
    pytest