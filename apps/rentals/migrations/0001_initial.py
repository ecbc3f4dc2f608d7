import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('movies', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Rental',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('anonymous_id', models.CharField(blank=True, db_index=True, max_length=100, null=True)),
                ('purchased_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('expires_at', models.DateTimeField()),
                ('transaction_id', models.CharField(max_length=100)),
                ('amount', models.IntegerField(help_text='Amount paid in minor currency units')),
                ('currency', models.CharField(default='LAK', max_length=3)),
                ('payment_method', models.CharField(blank=True, max_length=30)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('movie', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='rentals', to='movies.movie')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='rentals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'rentals',
                'ordering': ['-purchased_at'],
                'indexes': [
                    models.Index(fields=['user', 'expires_at'], name='rental_user_expiry_idx'),
                    models.Index(fields=['anonymous_id', 'expires_at'], name='rental_anon_expiry_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('user__isnull', False), ('anonymous_id__isnull', False), _connector='OR'), name='rental_has_owner'),
                ],
            },
        ),
    ]
