"""debloatctl - Remove bloatware from Android devices over adb."""

__version__ = "0.1.0"
