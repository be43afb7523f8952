"""String exercises: duplicates, anagrams, keypad codes and brackets."""

from string import ascii_uppercase

_KEYPAD_CODES = (
    "2", "22", "222", "3", "33", "333", "4", "44", "444", "5", "55", "555",
    "6", "66", "666", "7", "77", "777", "7777", "8", "88", "888", "9", "99",
    "999", "9999",
)
_KEYPAD = dict(zip(ascii_uppercase, _KEYPAD_CODES))
_KEYPAD[" "] = "0"

_PAIRS = {"}": "{", ")": "(", "]": "["}


def remove_duplicates(text):
    """Keep the first occurrence of every character, in order."""
    return "".join(dict.fromkeys(text))


def are_anagrams(first, second):
    """Tell whether two strings hold the same characters."""
    return sorted(first) == sorted(second)


def keypad_sequence(sentence):
    """Turn an upper-case sentence into mobile keypad presses."""
    try:
        return "".join(_KEYPAD[char] for char in sentence)
    except KeyError as error:
        raise ValueError(f"no keypad code for {error.args[0]!r}") from None


def is_balanced(expression):
    """Tell whether every bracket in the expression is matched."""
    stack = []
    for char in expression:
        if stack and _PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return not stack