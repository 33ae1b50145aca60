import json

from streamlit_js import st_js, st_js_blocking


def get_localstorage_value(key: str):
    """Get a value from localStorage using st_js_blocking"""
    code = f"return localStorage.getItem({json.dumps(key)});"
    return st_js_blocking(code, key="get_" + key)


def set_localstorage_value(key: str, value: str):
    code = f"localStorage.setItem({json.dumps(key)}, {json.dumps(value)});"
    st_js(code, key="set_" + key)


def remove_localstorage_value(key: str):
    st_js(f"localStorage.removeItem({json.dumps(key)});", key="remove_" + key)
