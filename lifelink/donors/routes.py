"""
Donor Routes

Directory search, account deletion and donation requests.
"""

import logging

from flask import jsonify, redirect, render_template, request, url_for
from flask_login import current_user, login_required

from lifelink.constants import BLOOD_TYPES, NAGPUR_AREAS
from lifelink.donors import donors_bp
from lifelink.errors import BackendUnavailable, Forbidden, NotFound, NotificationFailed
from lifelink.services import DonationRequest, build_request_message, get_services
from lifelink.utils import clear_session_cookie, request_data

logger = logging.getLogger(__name__)


@donors_bp.route('/')
@donors_bp.route('/index')
def index():
    """Home page for logged in users, otherwise the login page"""
    if current_user.is_authenticated:
        return render_template('index.html', title='Home')
    return redirect(url_for('auth.login_page'))


@donors_bp.route('/find-donor')
@login_required
def find_donor():
    blood_type = request.args.get('blood-type') or None
    city = request.args.get('city') or None
    error = request.args.get('error')
    try:
        donors = get_services().directory.search(blood_type=blood_type, city=city)
    except BackendUnavailable:
        logger.exception('Donor search failed')
        donors, error = [], 'Server error.'

    return render_template('find_donor.html',
                           title='Find Donor',
                           donors=donors,
                           current_user_id=current_user.id,
                           current_user_email=current_user.email,
                           is_admin=current_user.is_admin,
                           blood_types=BLOOD_TYPES,
                           areas=NAGPUR_AREAS,
                           selected_blood_type=blood_type,
                           selected_city=city,
                           error=error)


@donors_bp.route('/api/donors')
@login_required
def search_donors():
    """JSON donor search by `bloodType` and/or `city`."""
    donors = get_services().directory.search(
        blood_type=request.args.get('bloodType') or None,
        city=request.args.get('city') or None,
    )
    return jsonify(donors)


@donors_bp.route('/api/delete-donor/<int:donor_id>', methods=['POST'])
@login_required
def delete_donor(donor_id):
    """Admins can delete anyone, everyone else only their own account."""
    try:
        get_services().accounts.delete_account(current_user, donor_id)
    except NotFound:
        return jsonify({'error': 'Donor not found.'}), 404
    except Forbidden:
        return jsonify({'error': 'You can only delete your own account.'}), 403
    except BackendUnavailable:
        logger.exception('Deleting donor %s failed', donor_id)
        return jsonify({'error': 'Failed to delete account.'}), 500

    response = jsonify({'success': True, 'message': 'Account deleted successfully.'})
    if donor_id == current_user.id:
        clear_session_cookie(response)
    return response


@donors_bp.route('/request-donation')
@login_required
def request_donation():
    donor_id = request.args.get('donorId', type=int)
    if not donor_id:
        return redirect(url_for('donors.find_donor', error='Please select a donor'))
    try:
        donor = get_services().directory.get(donor_id)
    except BackendUnavailable:
        logger.exception('Loading donor %s failed', donor_id)
        return redirect(url_for('donors.find_donor', error='Server error'))
    if donor is None:
        return redirect(url_for('donors.find_donor', error='Donor not found'))
    return render_template('request_donation.html', title='Request Donation', donor=donor)


@donors_bp.route('/submit-request', methods=['POST'])
@login_required
def submit_request():
    """Email a donation request to the selected donor."""
    data = request_data()
    donor_id = data.get('donorId')
    if not donor_id:
        return jsonify({'error': 'Donor not specified.'}), 400
    try:
        donor_id = int(donor_id)
    except (TypeError, ValueError):
        return jsonify({'error': 'Donor not found.'}), 404

    services = get_services()
    try:
        donor = services.users.find_by_id(donor_id)
        if donor is None:
            return jsonify({'error': 'Donor not found.'}), 404
        message = build_request_message(donor, DonationRequest.from_form(data))
        services.notifier.send(message)
    except NotificationFailed:
        return jsonify({'error': 'Failed to send email.'}), 500
    except BackendUnavailable:
        logger.exception('Donation request for donor %s failed', donor_id)
        return jsonify({'error': 'Failed to send email.'}), 500
    logger.info('User %s sent a donation request to donor %s', current_user.email, donor_id)
    return jsonify({'success': True})
