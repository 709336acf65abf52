from amino.options import EnvOption

log_file = EnvOption('AMINO_HAMCREST_LOG_FILE')
lazy_workers = EnvOption('AMINO_HAMCREST_LAZY_WORKERS')

__all__ = ('log_file', 'lazy_workers')
