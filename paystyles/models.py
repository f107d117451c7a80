from paystyles import db
from paystyles.lib.time import utcnow_naive


class PaymentForm(db.Model):
    """A payment form owned by the host form system; styles hang off it."""
    __tablename__ = 'payment_form'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, default='')
    # 'embedded', 'overlay' or 'stripe_checkout' (off-site)
    display_type = db.Column(db.String(30), nullable=False, default='embedded')
    created_at = db.Column(db.DateTime, default=utcnow_naive)
    updated_at = db.Column(db.DateTime, default=utcnow_naive, onupdate=utcnow_naive)

    style_settings = db.relationship(
        'FormStyleSetting',
        backref='form',
        cascade='all, delete-orphan',
    )

    def __repr__(self):
        return f'<PaymentForm {self.id} ({self.display_type})>'


class FormStyleSetting(db.Model):
    """
    One stored style value for one form.

    Values are kept as text and re-sanitized on read, so a row holding an
    empty string is "explicitly stored empty", which differs from no row.
    """
    __tablename__ = 'form_style_setting'
    __table_args__ = (
        db.UniqueConstraint('form_id', 'key', name='uq_form_style_setting_form_key'),
    )

    id = db.Column(db.Integer, primary_key=True)
    form_id = db.Column(
        db.Integer,
        db.ForeignKey('payment_form.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    key = db.Column(db.String(64), nullable=False)
    value = db.Column(db.String(255), nullable=False, default='')
    updated_at = db.Column(db.DateTime, default=utcnow_naive, onupdate=utcnow_naive)

    def __repr__(self):
        return f'<FormStyleSetting form={self.form_id} {self.key}={self.value!r}>'
