"""
End-to-end tests for page payloads, routing through the real app, and health.
"""

from tests.utils import tenant_host


class TestMainDomainPages:

    def test_landing(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["register_url"] == "/register"

    def test_register_page(self, client):
        response = client.get("/register")

        assert response.status_code == 200
        assert response.json()["default_primary_color"] == "#3b82f6"
        assert response.json()["submit_url"] == "/api/tenants"

    def test_storefront_is_not_served_on_main_domain(self, client):
        response = client.get("/tenant", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/"

    def test_www_is_main_domain(self, client_for):
        response = client_for(tenant_host("www")).get("/")

        assert response.status_code == 200
        assert "tagline" in response.json()

    def test_admin_dashboard(self, client, make_tenant, make_product):
        acme = make_tenant("acme")
        make_tenant("globex")
        make_product(acme)
        make_product(acme, is_active=False)

        response = client.get("/admin")

        assert response.status_code == 200
        body = response.json()
        assert body["stats"] == {"total_tenants": 2, "total_users": 0, "total_products": 2}
        assert [t["subdomain"] for t in body["tenants"]] == ["globex", "acme"]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "database": "connected"}


class TestTenantPages:

    def test_root_redirects_to_storefront(self, client_for, make_tenant):
        make_tenant("acme")

        response = client_for(tenant_host("acme")).get("/", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/tenant"

    def test_storefront(self, client_for, make_tenant, make_product):
        acme = make_tenant("acme", name="Acme", primary_color="#ff6600")
        make_product(acme, name="Widget")
        make_product(acme, name="Retired", is_active=False)

        response = client_for(tenant_host("acme")).get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["tenant"]["name"] == "Acme"
        assert body["tenant"]["primary_color"] == "#ff6600"
        assert [p["name"] for p in body["products"]] == ["Widget"]

    def test_storefront_with_legacy_color(self, client_for, make_tenant):
        make_tenant("acme", primary_color="blue")

        response = client_for(tenant_host("acme")).get("/tenant")

        assert response.status_code == 200
        assert response.json()["tenant"]["primary_color"] == "blue"

    def test_unknown_tenant_lands_on_not_found(self, client_for):
        response = client_for(tenant_host("ghost")).get("/tenant")

        assert response.status_code == 404
        assert response.json()["subdomain"] == "ghost"
        assert response.json()["home_url"] == "/"

    def test_unknown_tenant_api_redirects(self, client_for):
        response = client_for(tenant_host("ghost")).get("/api/products", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/tenant-not-found"

    def test_newly_created_tenant_resolves(self, client, client_for):
        assert client.post("/api/tenants", json={"name": "Fresh", "subdomain": "fresh"}).status_code == 201

        response = client_for(tenant_host("fresh")).get("/tenant")

        assert response.status_code == 200
        assert response.json()["tenant"]["subdomain"] == "fresh"

    def test_local_development_host(self, client_for, make_tenant):
        make_tenant("acme")

        response = client_for("acme.localhost:3000").get("/tenant")

        assert response.status_code == 200
        assert response.json()["tenant"]["subdomain"] == "acme"
