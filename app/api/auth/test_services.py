# app/api/auth/test_services.py
import time

from app.services.store import REVOKED_TOKENS


def test_revoke_prunes_expired_entries(services, store):
    auth = services['auth']
    now = int(time.time())
    auth.revoke_token('expired-jti', now - 60)
    auth.revoke_token('live-jti', now + 3600)

    auth.revoke_token('newest-jti', now + 3600)

    assert sorted(doc['jti'] for doc in store.find(REVOKED_TOKENS)) == ['live-jti', 'newest-jti']
    assert auth.is_token_revoked({'jti': 'live-jti'})
    assert not auth.is_token_revoked({'jti': 'expired-jti'})
