"""Daily report (日報) analyzer package.

This package contains the core modules: grammar, models, sections, extractors,
categorizer, parser, aggregator, plus the data_loader, config, logger and
reporter modules used by the CLI.
"""

__all__ = [
    'grammar',
    'models',
    'sections',
    'extractors',
    'categorizer',
    'parser',
    'aggregator',
    'data_loader',
    'config',
    'logger',
    'reporter'
]
