"""
csvstats Configuration
======================
Every constant the command line, loader and report share.
No config files, no environment variables.

Usage:
    from csvstats.config import CONFIG, get
    label = get('labels.variance')   → 'Variance'
"""

CONFIG = {

    # =================================================================
    # Command line
    # =================================================================
    'cli': {
        'prog': 'csvstats',
        'description': 'Compute descriptive statistics over a CSV file of numbers.',
        'filename_help': 'file name to load data from (required)',
        'echo_filename': True,
    },

    # =================================================================
    # Input file
    # =================================================================
    'input': {
        'encoding': 'utf-8',
        'delimiter': ',',
        'quotechar': '"',
    },

    # =================================================================
    # Report
    # =================================================================
    'report': {
        'value_format': '{:f}',  # fixed-point, six fractional digits
        'nan': 'NaN',
        'inf': 'Infinity',
        'order': [
            'geometric_mean',
            'arithmetic_mean',
            'maximum',
            'minimum',
            'sum',
            'variance',
        ],
    },

    'labels': {
        'geometric_mean': 'Geometric mean',
        'arithmetic_mean': 'Arithmetic mean',
        'maximum': 'Max',
        'minimum': 'Min',
        'sum': 'Sum',
        'variance': 'Variance',
    },
}


def get(path: str, default=None):
    """
    Look up `section.key` in CONFIG; default when either part is missing.

        get('input.delimiter')   → ','
        get('labels.maximum')    → 'Max'
    """
    section, _, key = path.partition('.')
    return CONFIG.get(section, {}).get(key, default)
