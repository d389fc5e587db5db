from lifelink.errors import BackendUnavailable

JANE = {
    'fullName': 'Jane Doe',
    'email': 'jane@x.com',
    'password': 'password1',
    'confirmPassword': 'password1',
    'bloodType': 'O+',
    'city': 'Sadar',
    'termsAccepted': True,
}


def _cookie(client, app):
    return client.get_cookie(app.config['AUTH_COOKIE_NAME'])


def test_register_then_duplicate(client):
    r = client.post('/api/register', json=JANE)
    assert r.status_code == 200
    assert r.get_json() == {'success': True}

    r = client.post('/api/register', json=JANE)
    assert r.status_code == 400
    assert r.get_json() == {'errors': {'email': 'Email already registered.'}}


def test_register_form_reports_all_errors(client):
    r = client.post('/api/register', data={
        'fullName': 'J',
        'email': 'bad',
        'password': 'short',
        'confirmPassword': 'other',
        'bloodType': 'O+',
        'city': 'Nagpur',
    })
    assert r.status_code == 400
    assert set(r.get_json()['errors']) == {
        'fullName', 'email', 'password', 'confirmPassword', 'city', 'termsAccepted'}


def test_register_store_failure_is_generic(client, app, monkeypatch):
    def broken(form):
        raise BackendUnavailable('Could not create user.')

    monkeypatch.setattr(app.extensions['lifelink'].accounts, 'register', broken)
    r = client.post('/api/register', json=JANE)
    assert r.status_code == 500
    assert r.get_json() == {'errors': {'general': 'Server error.'}}


def test_login_sets_http_only_cookie(client, app, create_user, login):
    create_user('jane@x.com')
    r = login('jane@x.com')

    assert r.status_code == 200
    assert r.get_json() == {'success': True}
    set_cookie = r.headers['Set-Cookie']
    assert 'HttpOnly' in set_cookie
    assert 'SameSite=Lax' in set_cookie
    assert 'Secure' not in set_cookie
    assert _cookie(client, app) is not None


def test_login_errors(client, create_user, login):
    create_user('jane@x.com')

    r = login('nobody@x.com')
    assert r.status_code == 400
    assert r.get_json() == {'errors': {'email': 'Email not registered.'}}

    r = login('jane@x.com', 'wrong-password')
    assert r.status_code == 400
    assert r.get_json() == {'errors': {'password': 'Incorrect password.'}}

    r = client.post('/api/login', json={'email': 'jane@x.com'})
    assert r.status_code == 400
    assert r.get_json() == {'errors': {'general': 'Email and password required.'}}


def test_pages_redirect_to_login_when_anonymous(client):
    for path in ('/', '/find-donor', '/api/donors', '/request-donation?donorId=1'):
        r = client.get(path)
        assert r.status_code == 302, path
        assert '/login' in r.headers['Location']

    r = client.post('/api/delete-donor/1')
    assert r.status_code == 302


def test_unknown_cookie_is_anonymous(client, app):
    client.set_cookie(app.config['AUTH_COOKIE_NAME'], 'forged-token')
    r = client.get('/find-donor')
    assert r.status_code == 302


def test_donor_search_api(client, create_user, login):
    create_user('a@x.com', blood_type='O+', city='Sadar')
    create_user('b@x.com', blood_type='A+', city='Sadar')
    create_user('c@x.com', blood_type='O+', city='Ajni')
    login('a@x.com')

    r = client.get('/api/donors?bloodType=O%2B')
    assert r.status_code == 200
    donors = r.get_json()
    assert [d['email'] for d in donors] == ['c@x.com', 'a@x.com']
    assert all('password_hash' not in d for d in donors)

    r = client.get('/api/donors?bloodType=O%2B&city=Sadar')
    assert [d['email'] for d in r.get_json()] == ['a@x.com']


def test_find_donor_page(client, create_user, login):
    create_user('a@x.com', full_name='Asha Rao', blood_type='B-', city='Ajni')
    create_user('b@x.com', full_name='Bala Iyer', blood_type='O+', city='Sadar')
    login('a@x.com')

    r = client.get('/find-donor?blood-type=B-')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Asha Rao' in body
    assert 'Bala Iyer' not in body


def test_non_admin_cannot_delete_another_account(client, create_user, login):
    create_user('jane@x.com')
    john = create_user('john@x.com')
    login('jane@x.com')

    r = client.post(f'/api/delete-donor/{john}')
    assert r.status_code == 403
    assert r.get_json() == {'error': 'You can only delete your own account.'}


def test_self_delete_logs_out(client, app, create_user, login):
    jane = create_user('jane@x.com')
    login('jane@x.com')

    r = client.post(f'/api/delete-donor/{jane}')
    assert r.status_code == 200
    assert r.get_json() == {'success': True, 'message': 'Account deleted successfully.'}
    assert _cookie(client, app) is None
    assert client.get('/find-donor').status_code == 302


def test_admin_delete_succeeds_exactly_once(client, create_user, login):
    create_user('admin@x.com', is_admin=True)
    john = create_user('john@x.com')
    login('admin@x.com')

    assert client.post(f'/api/delete-donor/{john}').status_code == 200
    r = client.post(f'/api/delete-donor/{john}')
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Donor not found.'}


def test_admin_endpoint_requires_admin(client, create_user, login):
    r = client.post('/api/admin/purge-sessions')
    assert r.status_code == 403
    assert r.get_json() == {'error': 'Admin access required.'}

    create_user('jane@x.com')
    login('jane@x.com')
    assert client.post('/api/admin/purge-sessions').status_code == 403

    client.get('/logout')
    create_user('admin@x.com', is_admin=True)
    login('admin@x.com')
    r = client.post('/api/admin/purge-sessions')
    assert r.status_code == 200
    assert r.get_json() == {'success': True, 'purged': 0}


def test_logout(client, app, create_user, login):
    create_user('jane@x.com')
    login('jane@x.com')

    r = client.get('/logout')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/login')
    assert _cookie(client, app) is None
    assert client.get('/find-donor').status_code == 302


def test_logout_failure_is_not_reported_as_success(client, app, create_user, login, monkeypatch):
    create_user('jane@x.com')
    login('jane@x.com')

    def broken(token):
        raise BackendUnavailable('Could not destroy session.')

    monkeypatch.setattr(app.extensions['lifelink'].sessions, 'destroy', broken)
    r = client.get('/logout')
    assert r.status_code == 500
    assert r.get_json() == {'error': 'Failed to logout'}
    assert _cookie(client, app) is None


def test_request_donation_page(client, create_user, login):
    donor = create_user('donor@x.com', full_name='Dev Patil')
    create_user('jane@x.com')
    login('jane@x.com')

    r = client.get(f'/request-donation?donorId={donor}')
    assert r.status_code == 200
    assert 'Dev Patil' in r.get_data(as_text=True)

    r = client.get('/request-donation')
    assert r.status_code == 302
    assert 'error=Please+select+a+donor' in r.headers['Location']

    r = client.get('/request-donation?donorId=9999')
    assert 'error=Donor+not+found' in r.headers['Location']


def test_submit_request_emails_donor(client, notifier, create_user, login):
    donor = create_user('donor@x.com', full_name='Dev Patil')
    create_user('jane@x.com')
    login('jane@x.com')

    r = client.post('/submit-request', data={
        'donorId': str(donor),
        'patientName': 'Ravi Kumar',
        'patientAge': '54',
        'bloodType': 'O+',
        'unitsNeeded': '2',
        'hospital': 'City Hospital',
        'hospitalAddress': 'Civil Lines',
        'requesterName': 'Meera',
        'requesterPhone': '9876543210',
        'urgency': 'Urgent',
    })
    assert r.status_code == 200
    assert r.get_json() == {'success': True}
    assert len(notifier.sent) == 1
    message = notifier.sent[0]
    assert message.to == 'donor@x.com'
    assert message.subject == 'Blood Request for Ravi Kumar'
    assert 'Hello Dev Patil' in message.body


def test_submit_request_failures(client, notifier, create_user, login):
    donor = create_user('donor@x.com')
    login('donor@x.com')

    r = client.post('/submit-request', json={'patientName': 'Ravi'})
    assert r.status_code == 400
    assert r.get_json() == {'error': 'Donor not specified.'}

    r = client.post('/submit-request', json={'donorId': 9999})
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Donor not found.'}

    notifier.fail = True
    r = client.post('/submit-request', json={'donorId': donor, 'patientName': 'Ravi'})
    assert r.status_code == 500
    assert r.get_json() == {'error': 'Failed to send email.'}
    assert notifier.sent == []


def test_unknown_api_route_is_json_404(client):
    r = client.get('/api/no-such-endpoint')
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Page not found.'}


def test_unknown_page_renders_html_404(client):
    r = client.get('/find-donor/typo')
    assert r.status_code == 404
    assert r.mimetype == 'text/html'
    assert b'Page Not Found' in r.data


def test_numeric_json_password_logs_in_after_registering(client, app):
    r = client.post('/api/register', json=dict(
        JANE, password=12345678, confirmPassword=12345678))
    assert r.status_code == 200

    r = client.post('/api/login', json={'email': 'jane@x.com', 'password': 12345678})
    assert r.status_code == 200
    assert r.get_json() == {'success': True}
    assert _cookie(client, app) is not None


def test_non_string_login_fields_are_client_errors(client, create_user):
    create_user('jane@x.com')

    r = client.post('/api/login', json={'email': {'a': 1}, 'password': 'password1'})
    assert r.status_code == 400
    assert r.get_json() == {'errors': {'email': 'Email not registered.'}}

    r = client.post('/api/login', json={'email': 'jane@x.com', 'password': ['password1']})
    assert r.status_code == 400
    assert r.get_json() == {'errors': {'password': 'Incorrect password.'}}
