"""Persistent user settings for the CubePDF converter."""

from cubepdf_setting.user_setting import FIELD_RULES, UserSetting

__all__ = ["FIELD_RULES", "UserSetting"]
__version__ = "0.1.0"
