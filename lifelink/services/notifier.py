"""
Request Notifier

Builds the plain-text donation request email and hands it to an SMTP server.
Delivery is attempted once; failures surface as NotificationFailed.
"""

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr

from lifelink.errors import NotificationFailed

logger = logging.getLogger(__name__)


# form field name -> DonationRequest attribute
REQUEST_FORM_FIELDS = {
    'patientName': 'patient_name',
    'patientAge': 'patient_age',
    'bloodType': 'blood_type',
    'unitsNeeded': 'units_needed',
    'hospital': 'hospital',
    'hospitalAddress': 'hospital_address',
    'requesterName': 'requester_name',
    'requesterPhone': 'requester_phone',
    'requesterEmail': 'requester_email',
    'urgency': 'urgency',
    'neededBy': 'needed_by',
    'medicalCondition': 'medical_condition',
    'additionalInfo': 'additional_info',
}


@dataclass
class DonationRequest:
    """Requester-supplied details, copied verbatim into the email body."""
    patient_name: str = ''
    patient_age: str = ''
    blood_type: str = ''
    units_needed: str = ''
    hospital: str = ''
    hospital_address: str = ''
    requester_name: str = ''
    requester_phone: str = ''
    requester_email: str = ''
    urgency: str = ''
    needed_by: str = ''
    medical_condition: str = ''
    additional_info: str = ''

    @classmethod
    def from_form(cls, form):
        values = {}
        for key, attr in REQUEST_FORM_FIELDS.items():
            value = form.get(key)
            values[attr] = '' if value is None else str(value)
        return cls(**values)


@dataclass(frozen=True)
class MailMessage:
    to: str
    subject: str
    body: str
    sender: str = ''


def build_request_message(donor, request, sender=''):
    """Compose the email sent to `donor` (a User or a donor summary dict)."""
    if isinstance(donor, dict):
        name, email = donor['full_name'], donor['email']
    else:
        name, email = donor.full_name, donor.email

    body = (
        f'Hello {name},\n\n'
        f'You have a blood donation request:\n'
        f'Patient: {request.patient_name}, Age {request.patient_age}\n'
        f'Blood Type: {request.blood_type}, Units: {request.units_needed}\n'
        f'Hospital: {request.hospital}, {request.hospital_address}\n\n'
        f'Requester: {request.requester_name}\n'
        f'Phone: {request.requester_phone}\n'
        f'Email: {request.requester_email or "N/A"}\n'
        f'Urgency: {request.urgency}\n'
        f'Needed By: {request.needed_by or "N/A"}\n'
        f'Condition: {request.medical_condition or "N/A"}\n'
        f'Additional Info: {request.additional_info or "None"}\n\n'
        f'Thank you,\nLifeLink'
    )
    return MailMessage(
        to=email,
        subject=f'Blood Request for {request.patient_name}',
        body=body,
        sender=sender,
    )


class SmtpNotifier:
    """Send MailMessages through an SMTP relay."""

    def __init__(self, host, port=587, username=None, password=None, use_tls=True,
                 sender_name='LifeLink', timeout=10):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.sender = formataddr((sender_name, username)) if username else sender_name

    @classmethod
    def from_config(cls, config):
        return cls(
            host=config['MAIL_SERVER'],
            port=config['MAIL_PORT'],
            username=config.get('MAIL_USERNAME'),
            password=config.get('MAIL_PASSWORD'),
            use_tls=config.get('MAIL_USE_TLS', True),
            sender_name=config.get('MAIL_SENDER_NAME', 'LifeLink'),
            timeout=config.get('MAIL_TIMEOUT', 10),
        )

    def send(self, message):
        mail = EmailMessage()
        mail['From'] = message.sender or self.sender
        mail['To'] = message.to
        mail['Subject'] = message.subject
        mail.set_content(message.body)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(mail)
        except (smtplib.SMTPException, OSError) as e:
            logger.exception('Failed to send email to %s', message.to)
            raise NotificationFailed('Failed to send email.') from e
        logger.info('Sent donation request email to %s', message.to)
