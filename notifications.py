"""Names of the email templates the league sends."""

from enum import Enum


class EmailTemplate(Enum):
    CONFIRM_NEW_PRIMARY_EMAIL_HTML = 'ConfirmNewPrimaryEmailHtml'
    CONFIRM_NEW_PRIMARY_EMAIL_TXT = 'ConfirmNewPrimaryEmailTxt'
    CONFIRM_TEAM_APPLICATION_TXT = 'ConfirmTeamApplicationTxt'
    CONTACT_FORM_TXT = 'ContactFormTxt'
    PASSWORD_RESET_HTML = 'PasswordResetHtml'
    PASSWORD_RESET_TXT = 'PasswordResetTxt'
    PLEASE_CONFIRM_EMAIL_HTML = 'PleaseConfirmEmailHtml'
    PLEASE_CONFIRM_EMAIL_TXT = 'PleaseConfirmEmailTxt'
    CHANGE_FIXTURE_TXT = 'ChangeFixtureTxt'
    NOTIFY_CURRENT_PRIMARY_EMAIL_HTML = 'NotifyCurrentPrimaryEmailHtml'
    NOTIFY_CURRENT_PRIMARY_EMAIL_TXT = 'NotifyCurrentPrimaryEmailTxt'
    RESULT_ENTERED_TXT = 'ResultEnteredTxt'
    ANNOUNCE_NEXT_MATCH_TXT = 'AnnounceNextMatchTxt'
    REMIND_MATCH_RESULT_TXT = 'RemindMatchResultTxt'
    URGE_MATCH_RESULT_TXT = 'UrgeMatchResultTxt'
    HTML_LAYOUT = 'HtmlLayout'

    @property
    def is_html(self) -> bool:
        return self.value.endswith('Html') or self is EmailTemplate.HTML_LAYOUT

    @property
    def virtual_path(self) -> str:
        return f'/Email/{self.value}.tpl'

    @property
    def layout(self) -> 'EmailTemplate | None':
        """HTML templates render inside the HTML layout, plain text ones stand alone."""
        if self.is_html and self is not EmailTemplate.HTML_LAYOUT:
            return EmailTemplate.HTML_LAYOUT
        return None
