from burganhome.app.common.rate_limit import RateLimiter, limit_for_path


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


CONFIG = {"RATE_LIMIT_FORMS": (5, 300), "RATE_LIMIT_DEFAULT": (10, 60)}


# RL-001: allows up to the limit inside the window
def test_allows_until_limit():
    clock = Clock()
    limiter = RateLimiter(clock=clock)
    assert all(limiter.hit("forms:1.2.3.4", 5, 300) for _ in range(5))
    assert limiter.hit("forms:1.2.3.4", 5, 300) is False


# RL-002: capacity comes back once old requests leave the window
def test_window_slides():
    clock = Clock()
    limiter = RateLimiter(clock=clock)
    for _ in range(3):
        limiter.hit("k", 3, 60)
        clock.now += 10
    assert limiter.hit("k", 3, 60) is False

    clock.now = 1000.0 + 60
    assert limiter.hit("k", 3, 60) is True
    assert limiter.hit("k", 3, 60) is False


# RL-003: rejected requests do not extend the lockout
def test_rejections_not_recorded():
    clock = Clock()
    limiter = RateLimiter(clock=clock)
    limiter.hit("k", 1, 60)
    for _ in range(20):
        clock.now += 1
        assert limiter.hit("k", 1, 60) is False
    clock.now = 1000.0 + 60
    assert limiter.hit("k", 1, 60) is True


# RL-004: keys are independent
def test_keys_independent():
    limiter = RateLimiter(clock=Clock())
    assert limiter.hit("a", 1, 60)
    assert limiter.hit("b", 1, 60)
    assert limiter.hit("a", 1, 60) is False


# RL-005: stale keys are pruned once the map grows past max_keys
def test_prune_when_over_capacity():
    clock = Clock()
    limiter = RateLimiter(max_keys=2, clock=clock)
    limiter.hit("a", 5, 60)
    limiter.hit("b", 5, 60)
    clock.now += 120
    limiter.hit("c", 5, 60)
    assert len(limiter) == 1


# RL-006: live keys survive a prune
def test_prune_keeps_active_keys():
    clock = Clock()
    limiter = RateLimiter(clock=clock)
    limiter.hit("old", 5, 60)
    clock.now += 30
    limiter.hit("fresh", 5, 60)
    clock.now += 40
    assert limiter.prune() == 1
    assert len(limiter) == 1


# RL-007: form posts use the stricter quota
def test_limit_for_path():
    assert limit_for_path("/api/contact", CONFIG) == ("forms", 5, 300)
    assert limit_for_path("/api/quote", CONFIG) == ("forms", 5, 300)
    assert limit_for_path("/api/projects", CONFIG) == ("api", 10, 60)


# RL-008: the general API quota is enforced by the app
def test_api_quota(client):
    for _ in range(10):
        assert client.get("/api/projects").status_code == 200
    r = client.get("/api/projects")
    assert r.status_code == 429
    assert r.headers["Retry-After"] == "60"
    # Pages are never throttled
    assert client.get("/health").status_code == 200
