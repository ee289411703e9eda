"""Building blocks for similar-sentence search: splitting, measures, ensembles and id-tagged results."""

__version__ = "0.1.0"