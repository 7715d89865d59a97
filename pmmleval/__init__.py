"""Building blocks for evaluating PMML predictive models: values, predicates, built-in functions and normalization methods."""

__version__ = "0.1.0"