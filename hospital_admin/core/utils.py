import logging

audit_logger = logging.getLogger('hospital_admin.audit')


def log_entity_action(entity, action, record_id=None, user_id=None, meta=None):
    """Write an audit log line for a create, update or delete."""

    audit_logger.info(
        '%s %s (id=%s, user=%s)%s',
        entity,
        action,
        record_id,
        user_id or '-',
        f' meta={meta}' if meta else '',
    )
