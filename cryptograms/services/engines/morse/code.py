"""International Morse code for the 26 letters."""

from cryptograms.services.engines.alphabet import ALPHABET, is_letter, letter_value

DOT = "."
DASH = "-"

MORSE_ALPHABET: tuple[str, ...] = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---", "-.-", ".-..", "--",
    "-.", "---", ".--.", "--.-", ".-.", "...", "-", "..-", "...-", ".--", "-..-", "-.--", "--..",
)

MORSE_CODE: dict[str, str] = dict(zip(ALPHABET, MORSE_ALPHABET))


def morse_encode(letter: str) -> str:
    """Morse code of a single ASCII letter, either case."""
    if not is_letter(letter):
        raise ValueError(f"Can only morse encode ascii letters, got {letter!r}")
    return MORSE_ALPHABET[letter_value(letter)]


def morse_words(text: str) -> list[list[str]]:
    """
    Morse code of each whitespace separated word, one entry per letter.

    Characters other than letters are ignored, and words left without any
    letter are dropped.
    """
    words = []
    for word in text.split():
        letters = [morse_encode(char) for char in word if is_letter(char)]
        if letters:
            words.append(letters)
    return words
