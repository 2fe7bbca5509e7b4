from weatherkit.common.lookup import CodedEnum, Known, Unknown

__all__ = ["CodedEnum", "Known", "Unknown"]
