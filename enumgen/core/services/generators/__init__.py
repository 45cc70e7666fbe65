"""
Generators: produce Python source from sanitized buckets.

``enum_module`` holds the format-agnostic emitter; decorators such as
``bundle_line`` add format-specific members through the
``EnumDecorator`` hook.  The emitter returns ``GeneratedFile`` instances.
"""
