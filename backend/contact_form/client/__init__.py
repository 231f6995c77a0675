from __future__ import annotations

from contact_form.client.form import ContactForm, SubmitState, SubmitStatus

__all__ = ["ContactForm", "SubmitState", "SubmitStatus"]
