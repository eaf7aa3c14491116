"""Static help text for ``urlargs --help``."""

from __future__ import annotations

DESCRIPTION = """\
Run EXECUTABLE with percent-decoded (URL-decoded) arguments.

Every argument after EXECUTABLE is percent-decoded exactly once before
the program runs, so arguments containing quotes, semicolons, newlines
or other shell metacharacters can be passed without shell escaping.
With --filter, lines read from stdin are decoded as well."""

EPILOG = """\
encoding guidance:
  Encode any character that has a special meaning to the shell.
  Non-special characters pass through unchanged, so encoding
  liberally is harmless.

    space %20       "  %22      '  %27      ;  %3B      *  %2A
    ?     %3F       [  %5B      ]  %5D      (  %28      )  %29
    <     %3C       >  %3E      |  %7C      &  %26      $  %24
    \\     %5C       `  %60      !  %21      +  %2B      %  %25
    newline %0A     carriage return %0D     form feed %0C

  Always use %20 for a space. A plus sign is passed through as a
  literal '+', never as a space.
  Malformed escapes such as '%', '%2' or '%ZZ' are kept literally.
  Decoding happens once: '%2520' becomes '%20'.
  Quote encoded arguments when they still contain characters the
  shell could interpret.

examples:
  urlargs sqlite3 my.db "SELECT%20*%20FROM%20users"
  urlargs --dry-run grep "search%20term%20with%20spaces" notes.txt
  urlargs grep "%5E%5Bwxy%5D%2B%5C.%2A%24" file.txt
  urlargs find . -name "file%20with%20spaces" -exec cat {} "%3B"
  urlargs python3 -c "for%20i%20in%20range(3)%3A%0A%20%20print(i)"
  echo "SELECT%20*%20FROM%20users" | urlargs --filter
  echo "SELECT%20*%20FROM%20users" | urlargs --filter sqlite3 my.db

Options are only recognised before EXECUTABLE; use '--' when the
executable name itself starts with '-'."""
