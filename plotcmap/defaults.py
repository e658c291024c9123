import os
import json
import warnings
from inspect import currentframe
from sympy.external import import_module

appdirs = import_module(
    'appdirs',
    min_module_version='1.4.4')

appname = "plotcmap"
cfg_file = "config.json"
cfg_dir = appdirs.user_data_dir(appname)
os.makedirs(cfg_dir, exist_ok=True)
file_path = os.path.join(cfg_dir, cfg_file)


def _hardcoded_defaults():
    # Hardcoded default values
    return dict(
        # Trailing token that asks for filled markers whose face color
        # matches the computed line color.
        match_marker_face_color_token="MatchMarkerFaceColor",
        # Warn when the user provides a color that is going to be
        # replaced by the color computed from the palette.
        warn_color_override=True,
        palette={
            # Number of colors sampled from a continuous named colormap
            "n": 256,
        },
        # Camera used by 3D plots, in degrees
        view={
            "azim": -15,
            "elev": 20,
        },
        colorbar={
            # Label shown next to the colorbar. Empty string: no label.
            "label": "",
        },
    )


def get_default_settings():
    """Return the default setting dictionary for inspection.

    Examples
    ========

    Visualize the default settings.

        >>> from plotcmap.defaults import get_default_settings
        >>> print(get_default_settings())
    """
    return _hardcoded_defaults()


def reset():
    """Restore original settings."""
    set_defaults(_hardcoded_defaults())


def _load_settings():
    """Load settings and inject the names into the current namespace."""
    mergedeep = import_module('mergedeep')
    merge = mergedeep.merge

    frame = currentframe()

    cfg = dict()
    if os.path.exists(file_path):
        with open(file_path) as f:
            cfg = json.load(f)

    default_cfg = _hardcoded_defaults()

    # Because the user can directly change the configuration file, we need
    # to assure that all the necessary options are present (maybe, the user
    # deleted something accidentally)
    cfg = merge({}, default_cfg, cfg)

    token = cfg["match_marker_face_color_token"]
    if not (isinstance(token, str) and token.strip()):
        # restore hardcoded values in order to be able to load the module
        # the next time
        reset()

        raise ValueError(
            "`match_marker_face_color_token` must be a non-empty string.\n"
            + "Received: = '{}'\n".format(token)
            + "Reset config file to hardcoded default values: done."
        )

    if "cfg" in frame.f_globals:
        # keep the identity of the dictionary, other modules hold a
        # reference to it
        frame.f_globals["cfg"].clear()
        frame.f_globals["cfg"].update(cfg)
    else:
        frame.f_globals["cfg"] = cfg


def set_defaults(cfg):
    """Set the default options and save them to a file.

    Parameters
    ==========
    cfg : dict
        Dictionary containing the new values

    Examples
    ========

    Draw 3D lines from a different point of view.

        >>> from plotcmap.defaults import cfg, set_defaults
        >>> ## to visualize the current settings
        >>> # print(cfg)
        >>> cfg["view"]["azim"] = 30
        >>> set_defaults(cfg)

    Notes
    =====

    This module uses the `appdir` module [#fn1]_ to determine the
    best location where to save the settings. It will save a human readable
    `config.json` file, which SHOULD NOT be modified directly with a text
    editor.
    Use the ``set_defaults`` function to modify the configuration settings!

    References
    ==========

    .. [#fn1] https://github.com/ActiveState/appdirs

    """
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=4)
        warnings.warn("Successfully written settings to {}".format(file_path))

    _load_settings()


_load_settings()
