from flask import request, current_app


def page_from_request():
    try:
        page = int(request.args.get('page', 1))
        if page < 1:
            page = 1
    except (ValueError, TypeError):
        page = 1
        current_app.logger.debug("Pagination: Invalid page parameter, defaulting to 1")
    return page


def paginate(query, page, limit=None):
    """
    Offset pagination with a fixed page size.

    Returns:
        tuple: (items, {"page", "limit", "total", "pages"})
    """
    limit = limit or current_app.config['PAGE_SIZE']
    total = query.count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    pages = (total + limit - 1) // limit if total > 0 else 0
    return items, {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": pages
    }
