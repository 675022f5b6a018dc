"""
End-to-end tests through the HTTP API
"""
from datetime import date, timedelta
from unittest.mock import patch

import pytest

from foodshare.models import Availability, ExpirationAlert, FoodItem
from foodshare.services.alert_service import alert_service


def create_user(client, name="Alice", email="alice@example.com"):
    response = client.post(
        "/api/users",
        json={"UserName": name, "UserEmail": email, "UserPassword": "pw"},
    )
    assert response.status_code == 201
    return response.json()


def create_item(client, user_id, category_id, name="Milk", days=2, quantity=1):
    response = client.post(
        "/api/fooditems",
        json={
            "FoodName": name,
            "Quantity": quantity,
            "ExpirationDate": (date.today() + timedelta(days=days)).isoformat(),
            "UserId": user_id,
            "CategoryId": category_id,
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def actors(client):
    alice = create_user(client)
    bob = create_user(client, "Bob", "bob@example.com")
    category = client.post("/api/categories", json={"CategoryName": "Dairy"}).json()
    return {"alice": alice, "bob": bob, "category": category}


@pytest.mark.api
class TestRecords:
    """Uniform record operations and the wire format"""

    def test_user_wire_format(self, client):
        user = create_user(client)
        assert set(user) == {"UserId", "UserName", "UserEmail", "FoodPreference", "CreatedAt"}
        assert client.get(f"/api/users/{user['UserId']}").json()["UserName"] == "Alice"

    def test_duplicate_email_conflicts(self, client):
        create_user(client)
        response = client.post(
            "/api/users",
            json={"UserName": "Other", "UserEmail": "alice@example.com", "UserPassword": "x"},
        )
        assert response.status_code == 409
        assert response.json() == {"detail": "User with this email already exists"}

    def test_unknown_id_is_404(self, client):
        response = client.get("/api/users/999")
        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}
        assert client.delete("/api/fooditems/5").status_code == 404

    def test_validation_error_is_generic(self, client, actors):
        response = client.post(
            "/api/fooditems",
            json={
                "FoodName": "Milk",
                "Quantity": 0,
                "ExpirationDate": "not-a-date",
                "UserId": actors["alice"]["UserId"],
                "CategoryId": actors["category"]["CategoryId"],
            },
        )
        assert response.status_code == 422
        assert response.json() == {"detail": "Validation failed"}

    def test_food_item_crud(self, client, actors):
        item = create_item(
            client, actors["alice"]["UserId"], actors["category"]["CategoryId"], days=10
        )
        assert item["Status"] == "normal"

        updated = client.put(f"/api/fooditems/{item['FoodItemId']}", json={"Quantity": 3})
        assert updated.status_code == 200
        assert updated.json()["Quantity"] == 3
        assert updated.json()["FoodName"] == "Milk"

        listed = client.get("/api/fooditems", params={"userId": actors["alice"]["UserId"]})
        assert [i["FoodItemId"] for i in listed.json()] == [item["FoodItemId"]]

        assert client.delete(f"/api/fooditems/{item['FoodItemId']}").json() == {"message": "Deleted"}
        assert client.get("/api/fooditems").json() == []

    def test_null_for_required_field_is_a_validation_error(self, client, actors):
        item = create_item(client, actors["alice"]["UserId"], actors["category"]["CategoryId"])
        url = f"/api/fooditems/{item['FoodItemId']}"

        for body in ({"Quantity": None}, {"FoodName": None}, {"ExpirationDate": None}):
            response = client.put(url, json=body)
            assert response.status_code == 422
            assert response.json() == {"detail": "Validation failed"}

        user_url = f"/api/users/{actors['alice']['UserId']}"
        assert client.put(user_url, json={"UserName": None}).status_code == 422
        category_url = f"/api/categories/{actors['category']['CategoryId']}"
        assert client.put(category_url, json={"CategoryName": None}).status_code == 422

        assert client.get(url).json()["Quantity"] == 1

    def test_nullable_field_can_be_cleared(self, client, actors):
        user_url = f"/api/users/{actors['alice']['UserId']}"
        client.put(user_url, json={"FoodPreference": "vegan"})
        cleared = client.put(user_url, json={"FoodPreference": None})
        assert cleared.status_code == 200
        assert cleared.json()["FoodPreference"] is None

    def test_category_rename_and_duplicate(self, client, actors):
        category_id = actors["category"]["CategoryId"]
        renamed = client.put(f"/api/categories/{category_id}", json={"CategoryName": "Milk products"})
        assert renamed.json() == {"CategoryId": category_id, "CategoryName": "Milk products"}

        duplicate = client.post("/api/categories", json={"CategoryName": "Milk products"})
        assert duplicate.status_code == 409

    def test_availability_records(self, client, actors):
        item = create_item(client, actors["alice"]["UserId"], actors["category"]["CategoryId"])
        client.post(f"/api/fooditems/{item['FoodItemId']}/availability")

        rows = client.get("/api/availability").json()
        assert len(rows) == 1
        assert rows[0]["FoodItemId"] == item["FoodItemId"]
        assert rows[0]["OwnerId"] == actors["alice"]["UserId"]

        duplicate = client.post(
            "/api/availability",
            json={"FoodItemId": item["FoodItemId"], "OwnerId": actors["bob"]["UserId"]},
        )
        assert duplicate.status_code == 409

    def test_new_item_near_expiry_gets_persisted_alert(self, client, actors, test_db):
        item = create_item(client, actors["alice"]["UserId"], actors["category"]["CategoryId"])
        alerts = test_db.query(ExpirationAlert).all()
        assert [a.food_item_id for a in alerts] == [item["FoodItemId"]]


@pytest.mark.api
class TestSharingWorkflow:
    """Mark available, claim, accept / decline"""

    def test_mark_available_twice(self, client, actors, test_db):
        item = create_item(client, actors["alice"]["UserId"], actors["category"]["CategoryId"])
        url = f"/api/fooditems/{item['FoodItemId']}/availability"

        first = client.post(url)
        assert first.status_code == 201
        assert first.json()["Created"] is True
        assert first.json()["Status"] == "disponibil"

        second = client.post(url, json={"OwnerId": actors["alice"]["UserId"]})
        assert second.status_code == 200
        assert second.json()["Created"] is False
        assert second.json()["AvailabilityId"] == first.json()["AvailabilityId"]
        assert test_db.query(Availability).count() == 1

        available = client.get(
            "/api/fooditems/available", params={"excludeUserId": actors["bob"]["UserId"]}
        )
        assert [i["FoodItemId"] for i in available.json()] == [item["FoodItemId"]]
        mine_hidden = client.get(
            "/api/fooditems/available", params={"excludeUserId": actors["alice"]["UserId"]}
        )
        assert mine_hidden.json() == []

    def _claim(self, client, actors):
        item = create_item(client, actors["alice"]["UserId"], actors["category"]["CategoryId"])
        client.post(f"/api/fooditems/{item['FoodItemId']}/availability")
        response = client.post(
            f"/api/fooditems/{item['FoodItemId']}/claims",
            json={"UserId": actors["bob"]["UserId"], "PickupLocation": "Lobby"},
        )
        assert response.status_code == 201
        return item, response.json()

    def test_accept_claim(self, client, actors, test_db):
        item, claim = self._claim(client, actors)
        assert claim["ClaimStatus"] == "pending"
        assert client.get(f"/api/fooditems/{item['FoodItemId']}").json()["Status"] == "claimed"

        response = client.post(f"/api/claims/{claim['ClaimId']}/accept")
        assert response.status_code == 200
        body = response.json()
        assert body["Claim"]["ClaimStatus"] == "accepted"
        assert body["TransferredItem"]["UserId"] == actors["bob"]["UserId"]
        assert body["TransferredItem"]["FoodName"] == "Milk"
        assert body["TransferredItem"]["Status"] == "normal"
        assert client.get(f"/api/fooditems/{item['FoodItemId']}").status_code == 404

        again = client.post(f"/api/claims/{claim['ClaimId']}/accept")
        assert again.status_code == 409
        assert test_db.query(FoodItem).count() == 1

    def test_decline_claim(self, client, actors):
        item, claim = self._claim(client, actors)

        response = client.post(f"/api/claims/{claim['ClaimId']}/decline")
        assert response.status_code == 200
        assert response.json()["ClaimStatus"] == "rejected"
        assert client.get(f"/api/fooditems/{item['FoodItemId']}").json()["Status"] == "claimed"

    def test_resolved_claim_cannot_be_reopened(self, client, actors, test_db):
        item, claim = self._claim(client, actors)
        claim_url = f"/api/claims/{claim['ClaimId']}"
        client.post(f"{claim_url}/decline")

        reopened = client.put(claim_url, json={"ClaimStatus": "pending"})
        assert reopened.status_code == 409
        assert reopened.json() == {"detail": "Claim is already rejected"}

        assert client.post(f"{claim_url}/accept").status_code == 409
        assert client.get(claim_url).json()["ClaimStatus"] == "rejected"
        assert client.get(f"/api/fooditems/{item['FoodItemId']}").status_code == 200
        assert test_db.query(FoodItem).count() == 1

    def test_put_status_uses_the_workflow(self, client, actors):
        item, claim = self._claim(client, actors)
        claim_url = f"/api/claims/{claim['ClaimId']}"

        accepted = client.put(claim_url, json={"ClaimStatus": "accepted", "PickupLocation": "Gate"})
        assert accepted.status_code == 200
        assert accepted.json()["ClaimStatus"] == "accepted"
        assert accepted.json()["PickupLocation"] == "Gate"
        assert client.get(f"/api/fooditems/{item['FoodItemId']}").status_code == 404

        renamed = client.put(claim_url, json={"PickupLocation": "Lobby"})
        assert renamed.status_code == 200
        assert renamed.json()["PickupLocation"] == "Lobby"

    def test_claims_by_user(self, client, actors):
        _, claim = self._claim(client, actors)
        mine = client.get(f"/api/claims/byUser/{actors['bob']['UserId']}").json()
        theirs = client.get(f"/api/claims/byUser/{actors['alice']['UserId']}").json()

        assert [c["ClaimId"] for c in mine["MyClaims"]] == [claim["ClaimId"]]
        assert mine["ClaimsOnMyItems"] == []
        assert [c["ClaimId"] for c in theirs["ClaimsOnMyItems"]] == [claim["ClaimId"]]

    def test_claim_unknown_item(self, client, actors):
        response = client.post("/api/fooditems/77/claims", json={"UserId": 1})
        assert response.status_code == 404


@pytest.mark.api
class TestAlertsApi:
    """Display alerts and the explicit sync"""

    def test_display_alerts_schedule_background_sync(self, client, actors):
        user_id = actors["alice"]["UserId"]
        category_id = actors["category"]["CategoryId"]
        create_item(client, user_id, category_id, name="Milk", days=5)
        create_item(client, user_id, category_id, name="milk ", days=1)
        create_item(client, user_id, category_id, name="Ham", days=9)

        with patch.object(alert_service, "sync_in_background") as sync:
            response = client.get(f"/api/expirationalerts/byUser/{user_id}")

        assert response.status_code == 200
        alerts = response.json()
        assert [a["DaysUntilExpiration"] for a in alerts] == [1]
        assert alerts[0]["Message"] == "This item will expire in 1 day"
        assert alerts[0]["AlertStatus"] == "active"
        sync.assert_called_once()

    def test_explicit_sync_reports_counts(self, client, actors, test_db):
        create_item(client, actors["alice"]["UserId"], actors["category"]["CategoryId"])
        response = client.post("/api/expirationalerts/sync")
        assert response.status_code == 200
        assert response.json() == {"Created": 0, "Skipped": 1, "Failed": 0}

    def test_expiring_items(self, client, actors):
        user_id = actors["alice"]["UserId"]
        category_id = actors["category"]["CategoryId"]
        soon = create_item(client, user_id, category_id, days=2)
        create_item(client, user_id, category_id, name="Cheese", days=20)

        response = client.get("/api/expirationalerts/expiring/3")
        assert [i["FoodItemId"] for i in response.json()] == [soon["FoodItemId"]]
        assert client.get("/api/expirationalerts/expiring/-1").status_code == 422


@pytest.mark.api
class TestGroupsApi:
    """Groups, invitations and the overview"""

    def test_invitation_lifecycle(self, client, actors):
        alice_id = actors["alice"]["UserId"]
        bob_id = actors["bob"]["UserId"]

        created = client.post(
            "/api/friendgroups",
            json={"GroupName": "Neighbours", "OwnerId": alice_id, "InviteUserIds": [bob_id]},
        )
        assert created.status_code == 201
        group_id = created.json()["GroupId"]

        overview = client.get(f"/api/friendgroups/byUser/{bob_id}").json()
        assert [g["GroupId"] for g in overview["Invitations"]] == [group_id]
        member_id = overview["Invitations"][0]["GroupMemberId"]

        accepted = client.post(f"/api/groupmembers/{member_id}/accept")
        assert accepted.status_code == 200
        assert accepted.json()["Status"] == "accepted"

        overview = client.get(f"/api/friendgroups/byUser/{bob_id}").json()
        assert [g["GroupId"] for g in overview["MyGroups"]] == [group_id]
        assert overview["MyGroups"][0]["MemberCount"] == 2
        assert overview["MyGroups"][0]["IsOwner"] is False

        assert client.post(f"/api/groupmembers/{member_id}/decline").status_code == 409

    def test_details_and_reinvite(self, client, actors):
        alice_id = actors["alice"]["UserId"]
        bob_id = actors["bob"]["UserId"]
        group_id = client.post(
            "/api/friendgroups", json={"GroupName": "Flat", "OwnerId": alice_id}
        ).json()["GroupId"]

        invited = client.post(f"/api/friendgroups/{group_id}/invitations", json={"UserId": bob_id})
        assert invited.status_code == 201
        client.post(f"/api/groupmembers/{invited.json()['GroupMemberId']}/decline")

        explore = client.get(f"/api/friendgroups/byUser/{bob_id}").json()["Explore"]
        assert [g["GroupId"] for g in explore] == [group_id]

        details = client.get(f"/api/friendgroups/{group_id}/details").json()
        assert details["Group"]["GroupName"] == "Flat"
        assert [m["UserId"] for m in details["Members"]] == [alice_id]
        assert details["Members"][0]["IsOwner"] is True

    def test_legacy_association(self, client, actors):
        alice_id = actors["alice"]["UserId"]
        bob_id = actors["bob"]["UserId"]
        group_id = client.post(
            "/api/friendgroups", json={"GroupName": "Old", "OwnerId": alice_id}
        ).json()["GroupId"]
        client.post("/api/groupmembers", json={"GroupId": group_id, "UserId": bob_id})

        overview = client.get(f"/api/friendgroups/byUser/{bob_id}").json()
        assert [g["GroupId"] for g in overview["MyGroups"]] == [group_id]


@pytest.mark.api
class TestMisc:
    """Dashboard, social feed and bootstrap"""

    def test_dashboard(self, client, actors):
        user_id = actors["alice"]["UserId"]
        create_item(client, user_id, actors["category"]["CategoryId"], days=2)
        create_item(client, user_id, actors["category"]["CategoryId"], name="Rice", days=60)

        response = client.get(f"/api/users/{user_id}/dashboard")
        assert response.status_code == 200
        assert response.json() == {
            "UserId": user_id,
            "FoodItems": 2,
            "ActiveAlerts": 1,
            "Claims": 0,
            "Groups": 0,
        }
        assert client.get("/api/users/999/dashboard").status_code == 404

    def test_social_posts(self, client, actors):
        item = create_item(client, actors["alice"]["UserId"], actors["category"]["CategoryId"])
        created = client.post(
            "/api/socialposts",
            json={"Platform": "internal", "Message": "Milk up for grabs", "FoodItemId": item["FoodItemId"]},
        )
        assert created.status_code == 201
        assert created.json()["PostStatus"] == "posted"

        by_item = client.get(f"/api/socialposts/byFoodItem/{item['FoodItemId']}").json()
        assert [p["SocialPostId"] for p in by_item] == [created.json()["SocialPostId"]]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
