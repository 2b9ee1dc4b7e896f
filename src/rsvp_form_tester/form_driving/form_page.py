"""Form under test access layer."""

from __future__ import annotations

from typing import Protocol

from playwright.async_api import Page

from rsvp_form_tester.configuration.runtime_settings import FormLayout

_RESET_FORM_SCRIPT = """
([formId, successId, visibleClass]) => {
    const form = document.getElementById(formId);
    form.reset();
    form.style.display = '';
    const success = document.getElementById(successId);
    if (success) {
        success.classList.remove(visibleClass);
    }
    form.querySelectorAll('[style]').forEach((el) => { el.style.borderColor = ''; });
}
"""
_SET_VALUE_SCRIPT = "([id, value]) => { document.getElementById(id).value = value; }"
_SET_CHECKED_SCRIPT = "([id, checked]) => { document.getElementById(id).checked = checked; }"
_DISPATCH_CHANGE_SCRIPT = (
    "(id) => { document.getElementById(id).dispatchEvent(new Event('change', { bubbles: true })); }"
)
_REQUEST_SUBMIT_SCRIPT = "(id) => { document.getElementById(id).requestSubmit(); }"
_MISSING_IDS_SCRIPT = "(ids) => ids.filter((id) => document.getElementById(id) === null)"


class FormPage(Protocol):
    """Operations the driver performs on the form under test.

    Fields and choice groups are addressed by their table column names.
    """

    async def reset(self) -> None: ...

    async def fill_text(self, field: str, value: str) -> None: ...

    async def set_choice(self, group: str, option: str | None) -> None: ...

    async def notify_choice_changed(self, group: str, option: str) -> None: ...

    async def request_submit(self) -> None: ...


class PlaywrightFormPage:
    """FormPage that assigns DOM properties directly in a live Playwright page.

    Assigning `value`/`checked` does not fire the page's own listeners, which is
    why the driver raises change events explicitly.
    """

    def __init__(self, page: Page, layout: FormLayout) -> None:
        self._page = page
        self._layout = layout

    async def missing_element_ids(self) -> list[str]:
        return await self._page.evaluate(_MISSING_IDS_SCRIPT, list(self._layout.element_ids()))

    async def reset(self) -> None:
        await self._page.evaluate(
            _RESET_FORM_SCRIPT,
            [
                self._layout.form_id,
                self._layout.success_message_id,
                self._layout.success_visible_class,
            ],
        )

    async def fill_text(self, field: str, value: str) -> None:
        element_id = self._layout.text_field_ids[field]
        await self._page.evaluate(_SET_VALUE_SCRIPT, [element_id, value])

    async def set_choice(self, group: str, option: str | None) -> None:
        for candidate, element_id in self._layout.choice_ids[group].items():
            await self._page.evaluate(_SET_CHECKED_SCRIPT, [element_id, candidate == option])

    async def notify_choice_changed(self, group: str, option: str) -> None:
        await self._page.evaluate(_DISPATCH_CHANGE_SCRIPT, self._layout.choice_ids[group][option])

    async def request_submit(self) -> None:
        await self._page.evaluate(_REQUEST_SUBMIT_SCRIPT, self._layout.form_id)
