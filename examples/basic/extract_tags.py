"""Extract the contents of angle-bracket tags in one call."""

from entre import substrings_between

print(substrings_between("Some text <First> and <Second>", "<", ">"))
