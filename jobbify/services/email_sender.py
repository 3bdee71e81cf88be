"""
Email Sender Service

Sends plain-text mail through AWS SES.
"""
import logging
import boto3
from botocore.exceptions import ClientError, BotoCoreError
from typing import Optional, Dict, Any

from flask import current_app

logger = logging.getLogger(__name__)

# Global SES client (initialized on first use)
_ses_client = None


def get_ses_client():
    """Get or create AWS SES client."""
    global _ses_client

    if _ses_client is not None:
        return _ses_client

    config = current_app.config
    if not config.get('AWS_ACCESS_KEY_ID') or not config.get('AWS_SECRET_ACCESS_KEY'):
        raise ValueError("AWS credentials not configured. Set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY in environment.")

    if not config.get('SES_SENDER_EMAIL'):
        raise ValueError("SES sender email not configured. Set SES_SENDER_EMAIL in environment.")

    _ses_client = boto3.client(
        'ses',
        aws_access_key_id=config['AWS_ACCESS_KEY_ID'],
        aws_secret_access_key=config['AWS_SECRET_ACCESS_KEY'],
        region_name=config['AWS_REGION']
    )
    logger.info("AWS SES client initialized", extra={"region": config['AWS_REGION']})
    return _ses_client


def send_email_via_ses(
    recipient_email: str,
    subject: str,
    body: str,
    sender_email: Optional[str] = None
) -> Dict[str, Any]:
    """
    Send email via AWS SES.

    Args:
        recipient_email: Recipient email address
        subject: Email subject
        body: Email body (plain text)
        sender_email: Sender email (defaults to SES_SENDER_EMAIL from config)

    Returns:
        Dict with 'message_id' and 'success' keys

    Raises:
        ValueError: If the message is incomplete, SES is misconfigured or SES rejects it
    """
    if not recipient_email or not recipient_email.strip():
        raise ValueError("Recipient email is required")

    if not subject or not subject.strip():
        raise ValueError("Email subject is required")

    if not body or not body.strip():
        raise ValueError("Email body is required")

    sender = sender_email or current_app.config.get('SES_SENDER_EMAIL')
    if not sender:
        raise ValueError("Sender email not configured")

    try:
        response = get_ses_client().send_email(
            Source=sender,
            Destination={
                'ToAddresses': [recipient_email.strip()]
            },
            Message={
                'Subject': {
                    'Data': subject,
                    'Charset': 'UTF-8'
                },
                'Body': {
                    'Text': {
                        'Data': body,
                        'Charset': 'UTF-8'
                    }
                }
            }
        )
    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code', 'Unknown')
        error_message = e.response.get('Error', {}).get('Message', str(e))
        logger.warning("Email rejected by SES", extra={
            "recipient": recipient_email,
            "error_code": error_code
        })
        raise ValueError(f"Email rejected: {error_message}") from e
    except BotoCoreError as e:
        logger.error("SES request failed", extra={"error": str(e)})
        raise ValueError(f"AWS SES error: {str(e)}") from e

    message_id = response.get('MessageId')
    logger.info("Email sent successfully via SES", extra={
        "message_id": message_id,
        "recipient": recipient_email
    })

    return {
        'success': True,
        'message_id': message_id
    }
