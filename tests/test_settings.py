"""
tests/test_settings.py
"""
from __future__ import annotations


def test_get_settings_returns_defaults(client):
    rv = client.get("/api/settings")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["success"] is True
    settings = data["settings"]
    assert set(settings) == {"general", "appearance", "security", "notifications", "backup"}
    assert settings["general"]["siteName"] == "100lesme Blog"
    assert settings["security"]["maxLoginAttempts"] == 5


def test_get_single_section(client):
    rv = client.get("/api/settings?section=appearance")
    assert rv.get_json()["appearance"]["theme"] == "system"


def test_update_section_merges_shallowly(client):
    rv = client.put("/api/settings", json={"section": "general", "settings": {"siteName": "My Blog"}})
    assert rv.status_code == 200
    general = rv.get_json()["settings"]["general"]
    assert general["siteName"] == "My Blog"
    assert general["timezone"] == "UTC"

    again = client.get("/api/settings").get_json()["settings"]
    assert again["general"]["siteName"] == "My Blog"
    assert again["appearance"]["theme"] == "system"


def test_full_update_drops_unknown_sections(client):
    rv = client.put("/api/settings", json={"settings": {
        "appearance": {"theme": "dark"},
        "bogus": {"x": 1},
    }})
    settings = rv.get_json()["settings"]
    assert settings["appearance"] == {"theme": "dark"}
    assert "bogus" not in settings
    # 其余分区回落到默认值
    assert settings["backup"]["backupFrequency"] == "daily"


def test_update_unknown_section_is_rejected(client):
    rv = client.put("/api/settings", json={"section": "bogus", "settings": {"a": 1}})
    assert rv.status_code == 400
    assert rv.get_json() == {"error": "Unknown settings section: bogus", "success": False}


def test_put_without_settings_is_invalid(client):
    rv = client.put("/api/settings", json={"foo": "bar"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Invalid request body"


def test_reset_section_and_all(client):
    client.put("/api/settings", json={"section": "general", "settings": {"siteName": "Changed"}})
    client.put("/api/settings", json={"section": "appearance", "settings": {"theme": "dark"}})

    rv = client.put("/api/settings", json={"action": "reset", "section": "general"})
    settings = rv.get_json()["settings"]
    assert settings["general"]["siteName"] == "100lesme Blog"
    assert settings["appearance"]["theme"] == "dark"

    rv = client.put("/api/settings", json={"action": "reset"})
    assert rv.get_json()["settings"]["appearance"]["theme"] == "system"


def test_update_single_setting(client):
    rv = client.post("/api/settings", json={
        "action": "updateSetting", "section": "security", "key": "twoFactorEnabled", "value": True,
    })
    assert rv.status_code == 200
    assert rv.get_json()["settings"]["security"]["twoFactorEnabled"] is True


def test_update_setting_requires_value(client):
    rv = client.post("/api/settings", json={"action": "updateSetting", "section": "security", "key": "x"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Section, key, and value are required"


def test_backup_and_restore(client):
    client.put("/api/settings", json={"section": "general", "settings": {"siteName": "Before"}})
    backup = client.post("/api/settings", json={"action": "backup"}).get_json()
    assert backup["success"] is True
    assert backup["timestamp"].endswith("Z")
    assert backup["backup"]["general"]["siteName"] == "Before"

    client.put("/api/settings", json={"section": "general", "settings": {"siteName": "After"}})
    rv = client.post("/api/settings", json={"action": "restore", "backup": backup["backup"]})
    assert rv.status_code == 200
    assert rv.get_json()["settings"]["general"]["siteName"] == "Before"


def test_restore_requires_backup(client):
    rv = client.post("/api/settings", json={"action": "restore"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Backup data is required"


def test_unknown_action(client):
    rv = client.post("/api/settings", json={"action": "explode"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Invalid action"


def test_unknown_section_query_is_rejected(client):
    rv = client.get("/api/settings?section=bogus")
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Unknown settings section: bogus"
