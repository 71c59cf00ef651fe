"""Small helpers for characters, memory, strings, lists, formatted output and random bytes."""