def test_member_sees_practice_event_with_empty_description(admin_client, member_client):
    admin_client.post('/admin/events', json={'title': 'Practice', 'date': '2024-05-01'})
    r = member_client.get('/member/events')
    assert r.status_code == 200
    assert r.get_json() == [{'title': 'Practice', 'description': '', 'date': '2024-05-01'}]


def test_member_lists_only_active_events_by_date(admin_client, member_client):
    ids = {}
    for title, date in [('C', '2024-03-01'), ('A', '2024-01-01'), ('B', '2024-02-01')]:
        ids[title] = admin_client.post('/admin/events', json={
            'title': title, 'date': date, 'description': f'about {title}'}).get_json()['id']
    admin_client.put(f"/admin/events/{ids['B']}", json={'active': False})

    events = member_client.get('/member/events').get_json()
    assert [e['title'] for e in events] == ['A', 'C']
    assert all(set(e) == {'title', 'description', 'date'} for e in events)


def test_member_lists_only_active_materials(admin_client, member_client):
    first = admin_client.post('/admin/materials', json={
        'title': 'Basics', 'link': 'https://example.com/basics'}).get_json()['id']
    admin_client.post('/admin/materials', json={
        'title': 'Advanced', 'link': 'https://example.com/advanced'})
    admin_client.put(f'/admin/materials/{first}', json={'active': False})

    assert member_client.get('/member/materials').get_json() == [
        {'title': 'Advanced', 'link': 'https://example.com/advanced'}]
    assert len(admin_client.get('/admin/materials').get_json()) == 2


def test_member_has_no_write_access(member_client):
    assert member_client.post('/member/events', json={'title': 'x', 'date': 'y'}).status_code == 405
    assert member_client.post('/admin/materials', json={'title': 'x', 'link': 'y'}).status_code == 403


def test_session_info(member_client, admin_client):
    assert member_client.get('/member/session-info').get_json() == {'name': 'Member', 'role': 'member'}
    assert admin_client.get('/member/session-info').get_json() == {
        'name': 'Administrator', 'role': 'admin'}


def test_member_home_and_announcements(member_client):
    assert 'Member' in member_client.get('/member').get_json()['message']
    announcements = member_client.get('/member/announcements').get_json()
    assert len(announcements) == 2
    assert all({'title', 'text'} <= set(a) for a in announcements)
