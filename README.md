# myls

A small directory lister in the spirit of `ls`, and the printf-style
formatting and string helpers it is built on.

## Installation

```
pip install .
```

## Command line

```
myls                # list the visible entries of the current directory
myls some/dir       # list the visible entries of some/dir
myls -a some/dir    # list every entry of some/dir, hidden ones included
myls -l some/dir    # long listing of some/dir
```

How the arguments are handled (`myls.cli.main`):

- With no arguments, the visible entries of `.` are written one per line.
  Names starting with a dot are left out. The exit status is 0.
- Without a flag, only the first argument is listed. If it is a regular
  file, its path is written, but the command still tries to read it as a
  directory. That fails, and the exit status is 84. A path that does not
  exist also gives exit status 84.
- Each argument that starts with `-` is a flag. Only the letter after the
  dash counts: `a` runs the all-entries listing and `l` runs the long
  listing. Any other letter does nothing, and so does any letter after
  the first, so `-la` behaves like `-l`. Each flag lists the argument that
  follows it, or `.` when the flag is the last argument. If that listing
  fails, the command goes on silently.
- Once any flag has been seen, the command then tries a long listing of
  the first argument as well. When the first argument is the flag itself,
  as in `myls -l some/dir`, that path cannot be opened. The flag's listing
  is still printed, but the exit status is 84.

The all-entries listing writes `.` and `..` first. Every other entry
follows in the order the system returns them, hidden ones included. No
listing is sorted.

The long listing begins with a `total` line. It gives the sum of the
1 KiB block counts of the visible entries. Then each visible entry gets a
line of this form:

```
drwxr-xr-x 2 user group 4096 Jan 01 12:00 name
```

The columns are:

- type and permissions (`d` or `-`, then `rwx` for user, group and others)
- link count
- owner name
- group name
- size
- modification date
- name

The owner and group names are empty when they cannot be looked up.

Errors from looking up a path are written to standard error.

## Library use

Each listing function writes to a text stream, which is standard output
by default. Each raises `myls.listing.ListingError` when the directory
cannot be opened or read.

```python
import io
from myls.listing import list_plain, list_all, list_long, ListingError

buf = io.StringIO()
list_long(".", buf)
print(buf.getvalue())
```

`myls.listing` also provides:

- `is_file`
- `permissions(mode)`, which returns the ten-character permission column
- `total_blocks(path)`
- `format_entry(stats, name)`, which returns one long-listing line
  without its newline

`myls.cli.run_flag(flag, path, out)` runs the listing a flag letter
selects. It returns `False` for a letter it does not know.

### Formatting

`myls.fmt` is a compact printf-style formatter. It supports these
conversions: `%c %s %d %i %u %x %X %o %p %f %e %%`.

```python
from myls.fmt import format_string, printf

format_string("%s has %d entries (%x)\n", "dir", 42, 42)
# 'dir has 42 entries (2a)\n'
printf("total %d\n", 8)   # writes to stdout, returns the printed count
```

Its behaviour has some points to note:

- `%X` prints lower-case digits, the same as `%x`.
- `%s` with `None` prints nothing.
- An unknown conversion letter is dropped.
- A missing argument raises `ValueError`.
- Integers are treated as 32-bit values.
- `%x` and `%o` raise `ValueError` for negative values.
- A negative `%d` prints a single character, not a minus sign and digits.
- `%f` prints the rounded millionths without zero padding.
- `%e` prints values such as `5.0e+03`.
- `printf` accepts a `file=` stream. It returns a count of the literal
  characters and the `%c` and `%%` conversions only; other conversions
  add nothing to it.

Each conversion is also available as a function:

- `format_int`
- `format_unsigned`
- `format_hex`
- `format_oct`
- `format_pointer`
- `format_float`
- `format_exp`

### Text helpers

`myls.textutils` holds small helpers:

- `is_alnum(c)`: true for an ASCII letter or digit.
- `sign_letter(n)`: `'N'` for a negative number, `'P'` otherwise.
- `comb2()`: every pair `aa bb` with `aa < bb` from `00` to `99`, joined
  by `, `.
- `format_params(args)`: each argument on its own line.
- `format_float2(nb)`: a single-precision value with two truncated
  decimals.
- `sort_ints(values)`: the values in ascending order.
- `strings_differ(s1, s2)`: compares only up to the length of the
  shorter string.
- `compare_n(s1, s2, n)`: compares at most `n` characters and returns
  the character-code difference at the first mismatch, or 0.

## What it does not do

`myls` has these limits:

- It lists one directory per run and does not recurse.
- It does not sort entries.
- It does not combine flags.
- It does not colour its output.
- The long listing shows no symbolic-link targets. It marks only
  directories by type; every other kind of entry shows `-`.

## Running the tests

```
pip install .[test]
pytest
```