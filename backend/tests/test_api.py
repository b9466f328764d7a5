def create_room(host):
    host.emit('createGame', namespace='/')
    return [pkt for pkt in host.get_received('/') if pkt['name'] == 'gameCreated'][0]['args'][0]['roomCode']


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health_counts_rooms(client, make_client):
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 0}
    create_room(make_client())
    create_room(make_client())
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 2}


def test_room_lookup(client, make_client):
    code = create_room(make_client())
    alice = make_client()
    alice.emit('joinGame', {'roomCode': code, 'playerName': 'Alice'}, namespace='/')

    res = client.get(f'/api/rooms/{code}')
    assert res.status_code == 200
    room = res.get_json()
    assert room['roomCode'] == code
    assert room['phase'] == 'lobby'
    assert room['count'] == 1
    assert [p['name'] for p in room['players']] == ['Alice']


def test_room_lookup_unknown_code(client):
    res = client.get('/api/rooms/000000')
    assert res.status_code == 404
    assert res.get_json() == {'error': 'Room not found'}


def test_shutdown_clears_rooms(flask_app, client, make_client):
    from quizroom import shutdown_app

    create_room(make_client())
    shutdown_app(flask_app)
    assert client.get('/health').get_json()['rooms'] == 0


def test_parse_origins():
    from quizroom.config import parse_origins

    assert parse_origins('*') == '*'
    assert parse_origins('') == '*'
    assert parse_origins('http://a.test, http://b.test') == ['http://a.test', 'http://b.test']
    assert parse_origins(['http://a.test']) == ['http://a.test']
