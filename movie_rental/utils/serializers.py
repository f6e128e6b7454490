def _money(value):
    return float(value) if value is not None else None


def _iso(value):
    return value.isoformat() if value is not None else None


def genre_to_dict(g):
    return {"id": g.id, "name": g.name}


def movie_to_dict(m):
    return {
        "id": m.id,
        "title": m.title,
        "genre": {"id": m.genre_id, "name": m.genre_name},
        "number_in_stock": m.number_in_stock,
        "daily_rental_rate": _money(m.daily_rental_rate),
    }


def customer_to_dict(c):
    return {"id": c.id, "name": c.name, "phone": c.phone, "is_gold": bool(c.is_gold)}


def user_to_dict(u):
    return {"id": u.id, "name": u.name, "email": u.email, "is_admin": bool(u.is_admin)}


def rental_to_dict(r):
    return {
        "id": r.id,
        "customer": {
            "id": r.customer_id,
            "name": r.customer_name,
            "phone": r.customer_phone,
            "is_gold": bool(r.customer_is_gold),
        },
        "movie": {
            "id": r.movie_id,
            "title": r.movie_title,
            "daily_rental_rate": _money(r.movie_daily_rental_rate),
        },
        "date_out": _iso(r.date_out),
        "date_returned": _iso(r.date_returned),
        "rental_fee": _money(r.rental_fee),
    }
