from doorsite.config import Settings
from doorsite.schemas import ContactSubmission, OutboundEmail, is_blank


def sanitize(value) -> str:
    # Only angle brackets are neutralised; quotes and & pass through.
    if value is None:
        return ""
    return str(value).replace("<", "&lt;").replace(">", "&gt;")


def build_quote_email(submission: ContactSubmission, settings: Settings) -> OutboundEmail:
    name = sanitize(submission.name)
    phone = sanitize(submission.phone)
    message = sanitize(submission.message)
    if not is_blank(submission.email):
        email = sanitize(submission.email)
        email_cell = f'<a href="mailto:{email}">{email}</a>'
    else:
        email_cell = "—"

    html = f"""
        <div style="font-family: Arial, sans-serif; max-width: 560px; margin: 0 auto;">
          <h2 style="color: #1e3a8a; border-bottom: 2px solid #dbeafe; padding-bottom: 8px;">
            New Quote Request — Nate's Door Service
          </h2>
          <table style="width:100%; border-collapse:collapse; margin-top:16px;">
            <tr><td style="padding:8px 0; font-weight:bold; color:#374151; width:30%;">Name</td>
                <td style="padding:8px 0; color:#111827;">{name}</td></tr>
            <tr><td style="padding:8px 0; font-weight:bold; color:#374151;">Phone</td>
                <td style="padding:8px 0; color:#111827;"><a href="tel:{phone}">{phone}</a></td></tr>
            <tr><td style="padding:8px 0; font-weight:bold; color:#374151;">Email</td>
                <td style="padding:8px 0; color:#111827;">{email_cell}</td></tr>
            <tr><td style="padding:8px 0; font-weight:bold; color:#374151; vertical-align:top;">Message</td>
                <td style="padding:8px 0; color:#111827; white-space:pre-wrap;">{message}</td></tr>
          </table>
          <p style="margin-top:24px; font-size:12px; color:#9ca3af;">
            Sent from natesdoorservice.com contact form
          </p>
        </div>
    """

    return OutboundEmail(
        from_=settings.from_email,
        to=[settings.to_email],
        # Header field, read by the mail client; not embedded in the HTML.
        reply_to=None if is_blank(submission.email) else str(submission.email),
        subject=f"New Quote Request from {name}",
        html=html,
    )
