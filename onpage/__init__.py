__title__ = "OnPage"
__version__ = "1.0.0"
__author__ = "OnPage"
__license__ = "MIT"
__copyright__ = "2026 OnPage"
