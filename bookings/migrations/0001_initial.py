import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='EventBooking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('booker_name', models.CharField(help_text='Full name of the person making the booking', max_length=200)),
                ('booker_email', models.EmailField(help_text='Email address of the booker', max_length=255)),
                ('note', models.TextField(blank=True, default='', help_text='Optional notes or comments from the booker', max_length=1000)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, help_text='When the booking was created')),
                ('api_contact_id', models.CharField(blank=True, default='', help_text='Contact id returned by Memberbase (empty when the sync failed)', max_length=200)),
                ('api_response', models.TextField(blank=True, default='', help_text='Outcome message of the Memberbase call')),
                ('api_success', models.BooleanField(default=False, help_text='Whether the contact was created in Memberbase')),
                ('event', models.ForeignKey(db_column='event_key', help_text='The booked event', on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to='events.event', to_field='key')),
                ('member', models.ForeignKey(blank=True, help_text='Signed-in member who made the booking', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='bookings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Event booking',
                'verbose_name_plural': 'Event bookings',
                'db_table': 'event_bookings',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['booker_email'], name='event_booking_email_idx'), models.Index(fields=['created_at'], name='event_booking_created_idx')],
                'constraints': [models.UniqueConstraint(fields=('event', 'booker_email'), name='unique_booking_per_event_email')],
            },
        ),
    ]
