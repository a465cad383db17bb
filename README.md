# pwvalidator

Password strength checking based on estimated entropy. The package depends
only on the standard library.

A password is accepted when its estimated entropy in bits reaches a threshold
you choose. There are no fixed rules such as "at least one digit". When a
password falls short, the error explains what would make it stronger, and that
message is safe to show to end users.

## How the estimate works

Entropy is estimated as `log2(base ** length)`. It is computed in log space,
so large values do not overflow.

- **base** is the size of the character pool the password appears to draw
  from. Each character class that is present adds its whole size to the pool:
  - the replacement characters `!@$&*`
  - the separators `_-., `
  - the other specials ``"#%'()+/:;<=>?[\]^{|}~``
  - lowercase letters, uppercase letters and digits

  Each distinct character outside these classes adds one.
- **length** is measured after two kinds of run have been cut down:
  - runs of more than two identical characters
  - runs of more than two characters that follow one another in a common
    sequence. The sequences are the digits, the three letter rows of a
    keyboard and the alphabet, each read forwards or backwards.

  The remaining text is measured in UTF-8 bytes, so a non-ASCII character
  counts for more than one.

For example, `aaaa` has an effective length of 2, and so does `876543`.

## Usage

```python
from pwvalidator.validate import InsecurePasswordError, validate

password = "password"

try:
    validate(password, 60)
except InsecurePasswordError as err:
    print(err)
    # insecure password, try including more special characters,
    # using uppercase letters, using numbers or using a longer password
```

`validate` returns `None` when the password's entropy is at least the given
minimum. Otherwise it raises `InsecurePasswordError`, which is a subclass of
`ValueError`. The message suggests each of the following that applies:

- more special characters, unless the password has at least one replacement
  character, one separator and one other special
- lowercase letters
- uppercase letters
- numbers

If none of these apply, the message only suggests a longer password.

The parts of the estimate can also be used on their own:

```python
from pwvalidator.base import get_base
from pwvalidator.entropy import get_entropy, log_pow
from pwvalidator.length import get_length

password = "password"

get_base(password)     # 26: only lowercase letters are used
get_length(password)   # effective length after shortening runs
get_entropy(password)  # estimated entropy in bits

log_pow(7, 8, 2)       # log2(7 ** 8), computed without forming the power
```

`pwvalidator.length` also provides the helpers that the length estimate is
built from: `remove_more_than_two_repeating_chars`,
`remove_more_than_two_from_sequence` and `get_reversed_string`.

## Choosing a threshold

A minimum of 50 to 70 bits suits most applications. Higher values require
longer or more varied passwords.

## Scope

This is a library only. It provides no command-line tool, does not check
passwords against lists of known or breached passwords, and does not store or
hash passwords.