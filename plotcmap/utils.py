from numbers import Number
from sympy.external import import_module
from sympy.utilities.iterables import is_sequence


def _as_numeric_array(obj):
    """Convert ``obj`` to a numpy array of floats.

    Lists, tuples, ranges, numpy arrays, sympy matrices and real numbers
    (python, numpy or sympy numbers) are accepted. Return None if ``obj``
    can't be interpreted as real numeric data: for example strings,
    booleans, complex numbers, symbolic expressions or axes.
    """
    np = import_module('numpy')
    if isinstance(obj, (str, bytes, bool)) or obj is None:
        return None
    if not (
        isinstance(obj, (Number, range))
        or hasattr(obj, "__array__")
        or is_sequence(obj)
    ):
        return None

    try:
        arr = np.asarray(obj)
    except (ValueError, TypeError):
        # ragged nested sequences
        return None

    if arr.dtype.kind in "iuf":
        return arr.astype(float)
    if arr.dtype.kind == "O":
        # sympy numbers
        try:
            return arr.astype(float)
        except (ValueError, TypeError):
            return None
    return None


def _is_vector(arr):
    """Return True if the numeric array ``arr`` is a vector.

    Like in MATLAB, scalars, row vectors and column vectors are all vectors.
    """
    if arr is None:
        return False
    return (arr.ndim <= 1) or ((arr.ndim == 2) and (1 in arr.shape))


def _to_vector(obj):
    """Return a flat numpy array of floats if ``obj`` is a numeric vector,
    None otherwise.
    """
    arr = _as_numeric_array(obj)
    if not _is_vector(arr):
        return None
    return arr.flatten()


# taken from
# https://en.wikibooks.org/wiki/Algorithm_Implementation/Strings/Levenshtein_distance#Python
def levenshtein(s1, s2):
    if len(s1) < len(s2):
        return levenshtein(s2, s1)  # len(s1) >= len(s2)
    if len(s2) == 0:
        return len(s1)
    previous_row = range(len(s2) + 1)
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            # j+1 instead of j since previous_row and current_row are
            # one character longer than s2
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


# taken from plotly.py/packages/python/plotly/_plotly_utils/utils.py
def find_closest_string(string, strings):
    def _key(s):
        # sort by levenshtein distance and lexographically to maintain a stable
        # sort for different keys with the same levenshtein distance
        return (levenshtein(s, string), s)

    return sorted(strings, key=_key)[0]


def _find_misspelled_keys(keys, allowed_keys):
    """Find the user-provided keys that are not allowed and pair each one
    of them with the closest allowed key.

    Returns
    =======
    misspelled : dict
        Maps each unknown key to its possible match. Empty dictionary if all
        keys are allowed.
    """
    allowed_keys = list(set(allowed_keys))
    unknown = [k for k in keys if k not in allowed_keys]
    if len(allowed_keys) == 0:
        return {k: None for k in unknown}
    return {k: find_closest_string(k, allowed_keys) for k in unknown}


def _format_misspelled_keys(misspelled):
    msg = ""
    for k, possible_match in misspelled.items():
        msg += "* '%s'" % k
        if possible_match is not None:
            msg += ": did you mean '%s'?" % possible_match
        msg += "\n"
    return msg
