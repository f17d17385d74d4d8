import io

import pytest

from ossim.guessgame import GuessGame, Hint, play


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert (low, high) == (1, 10)
        return self.value


def _reader(tokens):
    items = iter(tokens)

    def read():
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return read


def test_guess_hints_and_tries():
    game = GuessGame(5)
    assert game.guess(7) is Hint.TOO_HIGH
    assert game.guess(3) is Hint.TOO_LOW
    assert game.guess(5) is Hint.CORRECT
    assert game.tries == 3
    assert game.solved


def test_target_out_of_range_rejected():
    with pytest.raises(ValueError):
        GuessGame(11)
    with pytest.raises(ValueError):
        GuessGame(0)


def test_new_draws_from_rng():
    game = GuessGame.new(_FixedRng(7))
    assert game.target == 7
    assert game.tries == 0


def test_play_counts_guesses_and_reports():
    out = io.StringIO()
    tries = play(_reader(["9", "1", "4"]), out, _FixedRng(4))
    assert tries == 3
    text = out.getvalue()
    assert "Too high!" in text
    assert "Too low!" in text
    assert "Correct! You got it in 3 guesses!" in text


def test_play_ignores_non_numbers():
    out = io.StringIO()
    tries = play(_reader(["abc", "2"]), out, _FixedRng(2))
    assert tries == 1


def test_play_raises_when_input_ends():
    with pytest.raises(EOFError):
        play(_reader(["1"]), io.StringIO(), _FixedRng(6))