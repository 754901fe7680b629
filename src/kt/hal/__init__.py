"""\
HAL (JSON Hypertext Application Language) resource support.

"""
