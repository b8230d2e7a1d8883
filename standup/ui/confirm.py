"""
Confirm-then-commit gate for destructive actions.

A destructive button calls ``ask`` and reruns; the next run renders the
pending question where ``confirm_gate`` is called for that key. Only one
question is pending at a time.
"""

from typing import Callable, MutableMapping, Optional

import streamlit as st

PENDING_KEY = "pending_confirm"


def _state(state: Optional[MutableMapping]) -> MutableMapping:
    return st.session_state if state is None else state


def ask(key: str, message: str, state: Optional[MutableMapping] = None) -> None:
    _state(state)[PENDING_KEY] = {"key": key, "message": message}


def pending(state: Optional[MutableMapping] = None) -> Optional[dict]:
    return _state(state).get(PENDING_KEY)


def clear(state: Optional[MutableMapping] = None) -> None:
    _state(state)[PENDING_KEY] = None


def resolve(key: str, confirmed: bool, action: Callable[[], None],
            state: Optional[MutableMapping] = None) -> bool:
    """Answer the pending question for ``key``. Runs ``action`` only on yes."""
    current = pending(state)
    if not current or current.get("key") != key:
        return False
    clear(state)
    if confirmed:
        action()
        return True
    return False


def confirm_gate(key: str, action: Callable[[], None], container=None) -> bool:
    current = pending()
    if not current or current.get("key") != key:
        return False
    target = container or st
    target.warning(current["message"])
    yes_col, no_col = target.columns(2)
    if yes_col.button("Yes", key=f"confirm-yes-{key}", type="primary", use_container_width=True):
        resolve(key, True, action)
        st.rerun()
    if no_col.button("Cancel", key=f"confirm-no-{key}", use_container_width=True):
        resolve(key, False, action)
        st.rerun()
    return True
